"""
Per-app settings store.

Each managed app gets its own INI file under ``<root>/App Settings/``. The
store owns the live ``AppSettings`` record for that app; panels never write
to it directly but go through ``update()`` so every change is persisted,
logged and broadcast in one place.
"""
from typing import Any, Callable, Dict, List, Mapping, Optional
import json
import os
import threading
from pathlib import Path

from PySide6.QtCore import QObject, QSettings, QStandardPaths, Signal

from core.logging.logger import get_logger, is_verbose_logging
from core.settings.models import SETTINGS_KEYS, AppSettings, coerce_field

logger = get_logger(__name__)

SETTINGS_ROOT_ENV = "PLAYCOVER_SETTINGS_ROOT"
SNAPSHOT_VERSION = 1


def default_settings_root() -> Path:
    """Return the directory holding the ``App Settings`` folder."""
    override = os.getenv(SETTINGS_ROOT_ENV)
    if override:
        return Path(override)
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if location:
        return Path(location)
    logger.warning("[FALLBACK] No writable app data location; using home directory")
    return Path.home() / ".playcover"


class AppSettingsStore(QObject):
    """
    Persistent settings for one app bundle.

    Thread-safe with change notifications. ``settings_changed`` carries the
    field name and new value, or ``('*', None)`` after reset/load/import.
    """

    settings_changed = Signal(str, object)  # field name, new value

    def __init__(self, bundle_identifier: str, root: Optional[Path] = None,
                 parent: Optional[QObject] = None):
        """
        Args:
            bundle_identifier: CFBundleIdentifier of the managed app
            root: Storage root; defaults to ``default_settings_root()``
            parent: Optional QObject parent
        """
        super().__init__(parent)

        if not bundle_identifier:
            raise ValueError("bundle_identifier must be a non-empty string")

        self._bundle_identifier = bundle_identifier
        self._root = Path(root) if root is not None else default_settings_root()
        self._path = self._root / "App Settings" / f"{bundle_identifier}.ini"
        self._path.parent.mkdir(parents=True, exist_ok=True)

        self._qsettings = QSettings(str(self._path), QSettings.Format.IniFormat)
        self._lock = threading.RLock()
        self._change_handlers: Dict[str, List[Callable[[Any, Any], None]]] = {}
        self._settings = AppSettings()

        self._set_defaults()
        self._read_into_record()

        logger.info("Settings store ready for %s (%s)", bundle_identifier, self._path)

    @property
    def bundle_identifier(self) -> str:
        return self._bundle_identifier

    @property
    def settings(self) -> AppSettings:
        """The live settings record. Reset and load mutate it in place."""
        return self._settings

    def settings_path(self) -> Path:
        return self._path

    def _set_defaults(self) -> None:
        """Write default values for keys missing from the file."""
        with self._lock:
            for key, value in AppSettings().to_dict().items():
                if not self._qsettings.contains(key):
                    self._qsettings.setValue(key, value)

    def _read_into_record(self) -> None:
        with self._lock:
            for name, key in SETTINGS_KEYS.items():
                raw = self._qsettings.value(key, getattr(AppSettings, name))
                try:
                    setattr(self._settings, name, coerce_field(name, raw))
                except (TypeError, ValueError):
                    default = getattr(AppSettings, name)
                    logger.warning(
                        "[FALLBACK] Stored value for %s is invalid (%r); using default %r",
                        name, raw, default,
                    )
                    setattr(self._settings, name, default)

    def get(self, name: str, default: Any = None) -> Any:
        """Return the current value of field ``name`` or ``default`` if unknown."""
        if name not in SETTINGS_KEYS:
            return default
        with self._lock:
            return getattr(self._settings, name)

    def update(self, name: str, value: Any) -> None:
        """
        Set a single field, persist it and notify listeners.

        Args:
            name: AppSettings field name (e.g. 'window_width')
            value: New value; coerced to the field type

        Raises:
            KeyError: ``name`` is not a settings field
        """
        self.update_many({name: value})

    def update_many(self, values: Mapping[str, Any]) -> None:
        """Set several fields at once. Each changed field is announced separately."""
        coerced = {name: coerce_field(name, value) for name, value in values.items()}

        changes = []
        with self._lock:
            for name, value in coerced.items():
                old_value = getattr(self._settings, name)
                setattr(self._settings, name, value)
                self._qsettings.setValue(SETTINGS_KEYS[name], value)
                changes.append((name, value, old_value))

        for name, value, old_value in changes:
            self.settings_changed.emit(name, value)
            for handler in list(self._change_handlers.get(name, [])):
                try:
                    handler(value, old_value)
                except Exception as e:
                    logger.error("Error in change handler for %s: %s", name, e)

            if is_verbose_logging():
                logger.debug("Setting changed: %s: %r -> %r", name, old_value, value)
            else:
                logger.debug("Setting changed: %s", name)

    def on_changed(self, name: str, handler: Callable[[Any, Any], None]) -> None:
        """
        Register a handler for when a specific field changes.

        Args:
            name: Field to watch
            handler: Callback function(new_value, old_value)
        """
        with self._lock:
            self._change_handlers.setdefault(name, []).append(handler)
        logger.debug("Registered change handler for %s", name)

    def save(self) -> None:
        """Force save settings to persistent storage."""
        with self._lock:
            self._qsettings.sync()
        logger.debug("Settings saved for %s", self._bundle_identifier)

    def load(self) -> None:
        """Re-read settings from persistent storage into the live record."""
        with self._lock:
            self._qsettings.sync()
            self._read_into_record()
        logger.debug("Settings loaded for %s", self._bundle_identifier)
        self.settings_changed.emit('*', None)

    def reset(self) -> None:
        """Reset every field of this app's settings to its default."""
        with self._lock:
            self._qsettings.clear()
            self._settings.restore_defaults()
            for key, value in self._settings.to_dict().items():
                self._qsettings.setValue(key, value)
            self._qsettings.sync()

        logger.info("Settings reset to defaults for %s", self._bundle_identifier)
        self.settings_changed.emit('*', None)

    def export_snapshot(self, path: str) -> bool:
        """Write a JSON snapshot of the record to ``path``."""
        try:
            with self._lock:
                payload: Dict[str, Any] = {
                    'settings_version': SNAPSHOT_VERSION,
                    'bundle_identifier': self._bundle_identifier,
                    'settings': self._settings.to_fields(),
                }
            target = Path(path)
            target.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding='utf-8')
            logger.info("Exported settings snapshot to %s", target)
            return True
        except OSError:
            logger.exception("Failed to export settings snapshot to %s", path)
            return False

    def import_snapshot(self, path: str) -> bool:
        """Apply a snapshot written by ``export_snapshot``.

        Unknown fields are skipped; fields missing from the snapshot keep
        their current values.
        """
        try:
            loaded = json.loads(Path(path).read_text(encoding='utf-8'))
        except (OSError, ValueError):
            logger.exception("Failed to read settings snapshot from %s", path)
            return False

        root: Any = loaded.get('settings', loaded) if isinstance(loaded, Mapping) else loaded
        if not isinstance(root, Mapping):
            logger.warning("Settings snapshot root is not a mapping: %r", type(root))
            return False

        source_id = loaded.get('bundle_identifier') if isinstance(loaded, Mapping) else None
        if isinstance(source_id, str) and source_id != self._bundle_identifier:
            logger.info(
                "Importing settings snapshot for '%s' into '%s'",
                source_id, self._bundle_identifier,
            )

        values = {}
        for name, value in root.items():
            if name not in SETTINGS_KEYS:
                logger.warning("Skipping unknown field in snapshot: %s", name)
                continue
            try:
                values[name] = coerce_field(name, value)
            except (TypeError, ValueError):
                logger.warning("Skipping invalid value for %s in snapshot: %r", name, value)

        with self._lock:
            self._settings.apply(values)
            for name, value in values.items():
                self._qsettings.setValue(SETTINGS_KEYS[name], value)
            self._qsettings.sync()

        self.settings_changed.emit('*', None)
        logger.info("Imported settings snapshot from %s (%d fields)", path, len(values))
        return True
