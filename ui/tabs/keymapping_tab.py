"""
Keymapping panel.

Toggles for keymapping and mouse mapping, plus the mouse sensitivity slider.
"""
from typing import Optional
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QCheckBox, QSlider
from PySide6.QtCore import Signal, Qt

from core.i18n import tr
from core.logging.logger import get_logger
from core.settings.app_settings_store import AppSettingsStore
from core.settings.models import SENSITIVITY_MAX, SENSITIVITY_MIN
from ui.tabs.settings_binding import (
    CheckBinding, SliderBinding, apply_bindings_load, collect_bindings_save,
)
from ui.tabs.shared_styles import build_scroll_page

logger = get_logger(__name__)


def sensitivity_text(value: float) -> str:
    return tr("settings.slider.mouseSensitivity") + f"{value:.0f}"


class KeymappingTab(QWidget):
    """Keymapping configuration tab."""

    keymapping_changed = Signal()

    def __init__(self, store: AppSettingsStore, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._store = store
        self._loading: bool = False
        self._bindings = [
            CheckBinding('keymapping', default=True, widget_attr='keymapping_check'),
            CheckBinding('mouse_mapping', default=True, widget_attr='mouse_mapping_check'),
            SliderBinding('sensitivity', default=50.0, widget_attr='sensitivity_slider'),
        ]
        self._setup_ui()
        self._load_settings()
        self._store.settings_changed.connect(self._on_store_changed)

        logger.debug("KeymappingTab created")

    def _setup_ui(self) -> None:
        _, layout = build_scroll_page(self)

        toggles_row = QHBoxLayout()
        self.keymapping_check = QCheckBox(tr("settings.toggle.km"))
        self.keymapping_check.setToolTip(tr("settings.toggle.km.help"))
        self.keymapping_check.stateChanged.connect(self._save_settings)
        toggles_row.addWidget(self.keymapping_check)

        self.mouse_mapping_check = QCheckBox(tr("settings.toggle.mm"))
        self.mouse_mapping_check.stateChanged.connect(self._save_settings)
        toggles_row.addWidget(self.mouse_mapping_check)
        toggles_row.addStretch()
        layout.addLayout(toggles_row)

        slider_row = QHBoxLayout()
        self.sensitivity_slider_label = QLabel(sensitivity_text(50.0))
        slider_row.addWidget(self.sensitivity_slider_label)
        self.sensitivity_slider = QSlider(Qt.Orientation.Horizontal)
        self.sensitivity_slider.setRange(int(SENSITIVITY_MIN), int(SENSITIVITY_MAX))
        self.sensitivity_slider.setMaximumWidth(400)
        self.sensitivity_slider.valueChanged.connect(self._on_sensitivity_changed)
        slider_row.addWidget(self.sensitivity_slider)
        slider_row.addStretch()
        layout.addLayout(slider_row)

        layout.addStretch()

    def _load_settings(self) -> None:
        """Load widget state from the settings record without writing back."""
        self._loading = True
        widgets = (self.keymapping_check, self.mouse_mapping_check, self.sensitivity_slider)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            apply_bindings_load(self, self._store.settings.to_fields(), self._bindings)
            self.sensitivity_slider_label.setText(sensitivity_text(self._store.settings.sensitivity))
        finally:
            for widget in widgets:
                widget.blockSignals(False)
            self._loading = False

    def _save_settings(self) -> None:
        if self._loading:
            return
        self._store.update_many(collect_bindings_save(self, self._bindings))
        self.keymapping_changed.emit()

    def _on_sensitivity_changed(self, value: int) -> None:
        self.sensitivity_slider_label.setText(sensitivity_text(value))
        self._save_settings()

    def _on_store_changed(self, name: str, _value: object) -> None:
        if name == '*':
            self._load_settings()
