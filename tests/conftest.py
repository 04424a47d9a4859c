"""
Shared pytest fixtures for settings tests.
"""
import os
import plistlib
import sys

# Allow the Qt tests to run without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope='session')
def qt_app():
    """Create QApplication instance for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
    # Don't quit - causes issues with pytest


@pytest.fixture
def settings_root(tmp_path):
    return tmp_path / "settings"


@pytest.fixture
def settings_store(qt_app, settings_root):
    """AppSettingsStore backed by a temporary INI file."""
    from core.settings import AppSettingsStore
    store = AppSettingsStore("com.example.game", root=settings_root)
    yield store
    store.save()


@pytest.fixture
def event_system():
    """Create EventSystem instance for testing."""
    from core.events import EventSystem
    system = EventSystem()
    yield system
    system.clear()


@pytest.fixture
def info_plist():
    """Info.plist contents of a typical game."""
    return {
        "CFBundleDisplayName": "Genshin",
        "CFBundleName": "GenshinImpact",
        "CFBundleIdentifier": "com.miHoYo.GenshinImpact",
        "CFBundleShortVersionString": "4.2.0",
        "CFBundleExecutable": "GenshinImpact",
        "MinimumOSVersion": "11.0",
        "LSApplicationCategoryType": "public.app-category.role-playing-games",
        "CFBundleIcons": {
            "CFBundlePrimaryIcon": {"CFBundleIconFiles": ["AppIcon60x60"]},
        },
    }


@pytest.fixture
def app_bundle(tmp_path, info_plist):
    """Minimal .app directory with an XML Info.plist."""
    bundle = tmp_path / "Genshin.app"
    bundle.mkdir()
    with open(bundle / "Info.plist", "wb") as f:
        plistlib.dump(info_plist, f)
    return bundle
