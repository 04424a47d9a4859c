"""
Typed settings record for a single PlayCover-managed app.

``AppSettings`` is the record the panels edit. The store persists it under
dotted QSettings keys (``keymapping.enabled``, ``graphics.window_width``...)
and hands the same instance to every panel, so callers never see raw
QSettings values.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple

from core.logging.logger import get_logger

logger = get_logger(__name__)


class IOSDevice(Enum):
    """Device models an app may be told it is running on."""
    IPAD_PRO_12_9_GEN1 = "iPad6,7"
    IPAD_PRO_12_9_GEN3 = "iPad8,6"
    IPAD_PRO_12_9_GEN5 = "iPad13,8"

    @property
    def label(self) -> str:
        return _DEVICE_LABELS[self]

    @classmethod
    def from_identifier(cls, identifier: Any) -> "IOSDevice":
        try:
            return cls(str(identifier))
        except ValueError:
            return DEFAULT_IOS_DEVICE


_DEVICE_LABELS = {
    IOSDevice.IPAD_PRO_12_9_GEN1: "iPad Pro (12.9-inch) (1st gen) | A9X | 4GB",
    IOSDevice.IPAD_PRO_12_9_GEN3: "iPad Pro (12.9-inch) (3rd gen) | A12Z | 4GB",
    IOSDevice.IPAD_PRO_12_9_GEN5: "iPad Pro (12.9-inch) (5th gen) | M1 | 8GB",
}

DEFAULT_IOS_DEVICE = IOSDevice.IPAD_PRO_12_9_GEN3

REFRESH_RATES: Tuple[int, ...] = (60, 120)

SENSITIVITY_MIN = 0.0
SENSITIVITY_MAX = 100.0


@dataclass
class AppSettings:
    """Per-app settings record.

    Field names are the public keys accepted by ``AppSettingsStore.update``.
    """
    keymapping: bool = True
    mouse_mapping: bool = True
    sensitivity: float = 50.0
    disable_timeout: bool = False
    ios_device_model: str = DEFAULT_IOS_DEVICE.value
    refresh_rate: int = 60
    window_width: int = 1920
    window_height: int = 1080
    bypass: bool = False

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        """Return the default value of every field."""
        return AppSettings().to_fields()

    def to_fields(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.field_names()}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dotted storage keys."""
        return {SETTINGS_KEYS[name]: value for name, value in self.to_fields().items()}

    def apply(self, values: Mapping[str, Any]) -> None:
        """Assign coerced values for the given field names in place."""
        for name, value in values.items():
            setattr(self, name, coerce_field(name, value))

    def restore_defaults(self) -> None:
        self.apply(self.defaults())


# Field name -> dotted QSettings key
SETTINGS_KEYS: Dict[str, str] = {
    'keymapping': 'keymapping.enabled',
    'mouse_mapping': 'keymapping.mouse_mapping',
    'sensitivity': 'keymapping.sensitivity',
    'disable_timeout': 'graphics.disable_timeout',
    'ios_device_model': 'graphics.ios_device_model',
    'refresh_rate': 'graphics.refresh_rate',
    'window_width': 'graphics.window_width',
    'window_height': 'graphics.window_height',
    'bypass': 'bypass.enabled',
}


def to_bool(value: Any, default: bool = False) -> bool:
    """Normalize a stored setting value to bool.

    QSettings INI files hand booleans back as "true"/"false" strings, so the
    common string forms are accepted alongside real bools and numbers.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("true", "1", "yes", "on"):
            return True
        if v in ("false", "0", "no", "off"):
            return False
        return default
    if value is None:
        return default
    return bool(value)


def _finite_float(name: str, value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return number


def coerce_field(name: str, value: Any) -> Any:
    """Coerce ``value`` to the declared type of field ``name``.

    Values outside a field's allowed set are replaced rather than rejected:
    sensitivity is clamped to 0-100, refresh rates other than 60/120 and
    unknown device identifiers fall back to their defaults.

    Raises:
        KeyError: ``name`` is not an AppSettings field.
        ValueError: numeric fields given something that is not a finite number.
    """
    if name not in SETTINGS_KEYS:
        raise KeyError(f"Unknown app setting: {name}")

    default = getattr(AppSettings, name)
    if isinstance(default, bool):
        return to_bool(value, default)
    if isinstance(default, int):
        number = int(_finite_float(name, value))
        if name == 'refresh_rate' and number not in REFRESH_RATES:
            logger.warning("[FALLBACK] Unsupported refresh rate %r; using %d Hz", value, default)
            return default
        return number
    if isinstance(default, float):
        clamped = _finite_float(name, value)
        if name == 'sensitivity':
            clamped = max(SENSITIVITY_MIN, min(SENSITIVITY_MAX, clamped))
        return clamped
    if name == 'ios_device_model':
        device = IOSDevice.from_identifier(value)
        if device.value != str(value):
            logger.warning("[FALLBACK] Unknown iOS device %r; using %s", value, device.value)
        return device.value
    return str(value)
