"""Per-app settings record and its persistent store."""

from .models import AppSettings, IOSDevice, REFRESH_RATES
from .app_settings_store import AppSettingsStore

__all__ = ['AppSettings', 'AppSettingsStore', 'IOSDevice', 'REFRESH_RATES']
