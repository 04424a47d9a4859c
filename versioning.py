"""Centralised version and naming information for PlayCover Settings.

Single source of truth for the application name, QSettings organization
and version so the runtime and the packaging metadata agree.
"""

APP_NAME: str = "PlayCover Settings"
APP_EXE_NAME: str = "playcover-settings"
APP_ORGANIZATION: str = "io.playcover.PlayCover"
APP_VERSION: str = "0.3.0"
APP_DESCRIPTION: str = "Edit keymapping, graphics and jailbreak bypass settings of a PlayCover app."


__all__ = [
    "APP_NAME",
    "APP_EXE_NAME",
    "APP_ORGANIZATION",
    "APP_VERSION",
    "APP_DESCRIPTION",
]
