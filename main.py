"""
PlayCover Settings - Main Entry Point

Opens the settings dialog for one installed app bundle.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication, QMessageBox

from core.events import EventSystem
from core.logging.logger import setup_logging, get_logger
from core.play_app import PlayApp
from ui.settings_dialog import AppSettingsDialog
from ui.toast import DEFAULT_DURATION_MS, ToastNotifier, ToastPresenter
from versioning import APP_DESCRIPTION, APP_EXE_NAME, APP_NAME, APP_ORGANIZATION, APP_VERSION

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=APP_EXE_NAME,
        description=APP_DESCRIPTION,
    )
    parser.add_argument("bundle", type=Path, help="Path to the installed .app bundle")
    parser.add_argument("-d", "--debug", action="store_true", help="Debug logging with console output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log full setting values (implies --debug)")
    parser.add_argument("--settings-root", type=Path, default=None,
                        help="Directory containing 'App Settings' (default: per-user app data)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the settings application."""
    args = parse_args(argv)
    setup_logging(debug=args.debug, verbose=args.verbose)

    logger.info("%s %s starting for %s", APP_NAME, APP_VERSION, args.bundle)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationVersion(APP_VERSION)

    try:
        play_app = PlayApp.from_bundle(args.bundle, settings_root=args.settings_root)
    except ValueError as e:
        logger.error("Cannot open %s: %s", args.bundle, e)
        QMessageBox.critical(None, APP_NAME, f"Failed to open app settings:\n{e}")
        return 1

    events = EventSystem()
    notifier = ToastNotifier(events)
    presenter = ToastPresenter(events)

    dialog = AppSettingsDialog(play_app, notifier, event_system=events)
    presenter.set_anchor(dialog)
    dialog.exec()

    play_app.settings.save()
    if presenter.popups:
        # Keep the event loop alive long enough for the "reset completed" toast
        QTimer.singleShot(DEFAULT_DURATION_MS + 250, app.quit)
        app.exec()
    presenter.close()

    logger.info("%s exiting", APP_NAME)
    return 0


if __name__ == "__main__":
    sys.exit(main())
