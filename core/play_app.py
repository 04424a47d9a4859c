"""
A single PlayCover-managed app: its bundle metadata, icon and settings store.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from core.app_info import AppInfo, find_icon
from core.logging.logger import get_logger
from core.settings.app_settings_store import AppSettingsStore

logger = get_logger(__name__)


class PlayApp:
    """Owns the settings store for one app bundle."""

    def __init__(self, info: AppInfo, settings: AppSettingsStore,
                 icon_path: Optional[Path] = None):
        self.info = info
        self.settings = settings
        self.icon_path = icon_path

    @classmethod
    def from_bundle(cls, bundle_path: Path, settings_root: Optional[Path] = None) -> "PlayApp":
        """Load app info from ``bundle_path`` and open its settings store.

        Raises:
            AppInfoError: the bundle has no readable Info.plist
            ValueError: the bundle declares no CFBundleIdentifier
        """
        info = AppInfo.from_bundle(bundle_path)
        if not info.bundle_identifier:
            raise ValueError(f"{bundle_path} has no CFBundleIdentifier")
        store = AppSettingsStore(info.bundle_identifier, root=settings_root)
        icon = find_icon(bundle_path, info)
        logger.info("Opened app %s (%s), icon=%s", info.name, info.bundle_identifier, icon)
        return cls(info, store, icon)

    @property
    def name(self) -> str:
        return self.info.name or self.info.bundle_identifier

    def __repr__(self) -> str:
        return f"PlayApp({self.info.bundle_identifier!r})"
