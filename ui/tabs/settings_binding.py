"""Declarative settings binding for the settings panels.

Maps panel widgets to AppSettings field names so each panel does not repeat
its own load/save code. Each binding knows how to:
- Load a value from the settings record -> set on widget
- Save a value from widget -> (field, value) pair for the store
- Update an optional label

Usage:
    BINDINGS = [
        CheckBinding('keymapping', widget_attr='keymapping_check'),
        SliderBinding('sensitivity', widget_attr='sensitivity_slider',
                      label_fmt='Mouse sensitivity: {:.0f}'),
        ComboDataBinding('ios_device_model', widget_attr='device_combo'),
    ]

    # Load:
    apply_bindings_load(tab, store.settings.to_fields(), BINDINGS)

    # Save:
    store.update_many(collect_bindings_save(tab, BINDINGS))
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Union

from core.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SliderBinding:
    """Bind a QSlider/QSpinBox to a numeric field.

    - On load: value * scale -> widget.setValue(), optional label update
    - On save: widget.value() / scale -> field value
    """
    key: str
    scale: float = 1.0
    default: float = 0.0
    label_fmt: str = ''
    label_suffix: str = '_label'
    widget_attr: str = ''  # defaults to key if empty

    def _widget_name(self) -> str:
        return self.widget_attr or self.key

    def update_label(self, tab: Any, value: float) -> None:
        if not self.label_fmt:
            return
        lbl_name = self._widget_name() + self.label_suffix
        if hasattr(tab, lbl_name):
            getattr(tab, lbl_name).setText(self.label_fmt.format(value))

    def load(self, tab: Any, config: dict) -> None:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return
        raw = config.get(self.key, self.default)
        try:
            value = float(raw)
        except (TypeError, ValueError):
            value = float(self.default)
        getattr(tab, wname).setValue(int(round(value * self.scale)))
        self.update_label(tab, value)

    def save(self, tab: Any) -> Optional[tuple]:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return None
        return (self.key, getattr(tab, wname).value() / self.scale)


@dataclass
class CheckBinding:
    """Bind a QCheckBox to a boolean field."""
    key: str
    default: bool = False
    widget_attr: str = ''

    def _widget_name(self) -> str:
        return self.widget_attr or self.key

    def load(self, tab: Any, config: dict) -> None:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return
        getattr(tab, wname).setChecked(bool(config.get(self.key, self.default)))

    def save(self, tab: Any) -> Optional[tuple]:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return None
        return (self.key, getattr(tab, wname).isChecked())


@dataclass
class ComboDataBinding:
    """Bind a QComboBox (using currentData/findData) to a field."""
    key: str
    default: Any = None
    widget_attr: str = ''

    def _widget_name(self) -> str:
        return self.widget_attr or self.key

    def load(self, tab: Any, config: dict) -> None:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return
        widget = getattr(tab, wname)
        idx = widget.findData(config.get(self.key, self.default))
        if idx < 0 and self.default is not None:
            idx = widget.findData(self.default)
        if idx >= 0:
            widget.setCurrentIndex(idx)

    def save(self, tab: Any) -> Optional[tuple]:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return None
        return (self.key, getattr(tab, wname).currentData())


@dataclass
class ButtonGroupBinding:
    """Bind an exclusive QButtonGroup to a field whose values are button ids."""
    key: str
    default: int = 0
    widget_attr: str = ''

    def _widget_name(self) -> str:
        return self.widget_attr or self.key

    def load(self, tab: Any, config: dict) -> None:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return
        group = getattr(tab, wname)
        button = group.button(int(config.get(self.key, self.default)))
        if button is None:
            button = group.button(int(self.default))
        if button is not None:
            button.setChecked(True)

    def save(self, tab: Any) -> Optional[tuple]:
        wname = self._widget_name()
        if not hasattr(tab, wname):
            return None
        checked = getattr(tab, wname).checkedId()
        return (self.key, checked if checked != -1 else self.default)


Binding = Union[SliderBinding, CheckBinding, ComboDataBinding, ButtonGroupBinding]


def apply_bindings_load(tab: Any, config: dict, bindings: List[Binding]) -> None:
    """Load all bindings from a field mapping onto tab widgets."""
    for binding in bindings:
        try:
            binding.load(tab, config)
        except (TypeError, ValueError) as e:
            logger.debug("[SETTINGS_BINDING] Failed to load '%s': %s",
                         getattr(binding, 'key', '?'), e)


def collect_bindings_save(tab: Any, bindings: List[Binding]) -> dict:
    """Collect all binding values from tab widgets into a field mapping."""
    result = {}
    for binding in bindings:
        pair = binding.save(tab)
        if pair is not None:
            result[pair[0]] = pair[1]
    return result
