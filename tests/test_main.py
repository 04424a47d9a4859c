"""
Tests for the command line entry point.
"""
import plistlib
from pathlib import Path

import pytest

import main


def test_parse_args_defaults():
    args = main.parse_args(["/Applications/Genshin.app"])

    assert args.bundle == Path("/Applications/Genshin.app")
    assert args.debug is False
    assert args.verbose is False
    assert args.settings_root is None


def test_parse_args_flags(tmp_path):
    args = main.parse_args(["-d", "--verbose", "--settings-root", str(tmp_path), "x.app"])

    assert args.debug is True
    assert args.verbose is True
    assert args.settings_root == tmp_path


def test_parse_args_requires_bundle():
    with pytest.raises(SystemExit):
        main.parse_args([])


@pytest.fixture
def quiet_main(monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: None)


def test_main_reports_unreadable_bundle(qt_app, quiet_main, monkeypatch, tmp_path):
    shown = []
    monkeypatch.setattr(main.QMessageBox, "critical", lambda *args: shown.append(args))

    assert main.main([str(tmp_path / "Missing.app")]) == 1
    assert len(shown) == 1


def test_main_runs_dialog(qt_app, quiet_main, monkeypatch, app_bundle, settings_root):
    opened = []
    monkeypatch.setattr(main.AppSettingsDialog, "exec", lambda self: opened.append(self) or 0)

    assert main.main([str(app_bundle), "--settings-root", str(settings_root)]) == 0
    assert len(opened) == 1
    assert (settings_root / "App Settings" / "com.miHoYo.GenshinImpact.ini").exists()


def test_version_flag(capsys):
    with pytest.raises(SystemExit):
        main.parse_args(["--version"])

    assert main.APP_VERSION in capsys.readouterr().out


def test_main_reports_bundle_without_identifier(qt_app, quiet_main, monkeypatch, tmp_path, settings_root):
    bundle = tmp_path / "Nameless.app"
    bundle.mkdir()
    with open(bundle / "Info.plist", "wb") as f:
        plistlib.dump({"CFBundleName": "Nameless"}, f)
    shown = []
    monkeypatch.setattr(main.QMessageBox, "critical", lambda *args: shown.append(args))

    assert main.main([str(bundle), "--settings-root", str(settings_root)]) == 1
    assert "CFBundleIdentifier" in shown[0][2]
