"""
Graphics panel.

Display sleep, spoofed iOS device, adaptive resolution and refresh rate.

The resolution and aspect ratio pickers are not stored anywhere; changing
either one recomputes the window size through ``core.resolution`` and
commits it to the app's settings immediately. Opening the panel does not
recompute, so a previously stored window size survives until the user
touches a picker.
"""
from typing import Callable, Optional, Tuple
from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QLabel, QComboBox, QSpinBox, QCheckBox,
    QRadioButton, QPushButton, QButtonGroup,
)
from PySide6.QtCore import Signal

from core.events import EventSystem, EventType
from core.i18n import tr
from core.logging.logger import get_logger
from core.resolution import (
    AspectRatioTier, ResolutionTier, FIXED_HEIGHTS, INITIAL_ASPECT_RATIO,
    INITIAL_TIER, DEFAULT_RESOLUTION, apply_resolution,
)
from core.settings.app_settings_store import AppSettingsStore
from core.settings.models import DEFAULT_IOS_DEVICE, IOSDevice, REFRESH_RATES
from ui.tabs.settings_binding import (
    ButtonGroupBinding, CheckBinding, ComboDataBinding,
    apply_bindings_load, collect_bindings_save,
)
from ui.tabs.shared_styles import SPINBOX_STYLE, build_scroll_page
from utils.screens import get_visible_width

logger = get_logger(__name__)

CUSTOM_DIMENSION_MAX = 8192

_TIER_LABELS = (
    (ResolutionTier.OFF, "settings.picker.adaptiveRes.0"),
    (ResolutionTier.AUTO, "settings.picker.adaptiveRes.1"),
    (ResolutionTier.P1080, "1080p"),
    (ResolutionTier.P1440, "1440p"),
    (ResolutionTier.P4K, "4K"),
    (ResolutionTier.CUSTOM, "Custom"),
)

_ASPECT_LABELS = (
    (AspectRatioTier.R4_3, "4:3"),
    (AspectRatioTier.R16_9, "16:9"),
    (AspectRatioTier.R16_10, "16:10"),
)


class GraphicsTab(QWidget):
    """Graphics configuration tab."""

    resolution_changed = Signal(int, int)  # width, height

    def __init__(self, store: AppSettingsStore,
                 event_system: Optional[EventSystem] = None,
                 screen_width_provider: Callable[[], int] = get_visible_width,
                 parent: Optional[QWidget] = None):
        """
        Args:
            store: Settings store of the app being configured
            event_system: Optional bus for ``resolution.changed`` events
            screen_width_provider: Returns the main screen's visible width
            parent: Parent widget
        """
        super().__init__(parent)

        self._store = store
        self._events = event_system
        self._screen_width = screen_width_provider
        self._loading: bool = False
        self._bindings = [
            CheckBinding('disable_timeout', default=False, widget_attr='disable_sleep_check'),
            ComboDataBinding('ios_device_model', default=DEFAULT_IOS_DEVICE.value,
                             widget_attr='device_combo'),
            ButtonGroupBinding('refresh_rate', default=REFRESH_RATES[0],
                               widget_attr='refresh_rate_group'),
        ]
        self._setup_ui()
        self._load_settings()
        self._store.settings_changed.connect(self._on_store_changed)

        logger.debug("GraphicsTab created")

    def _setup_ui(self) -> None:
        _, layout = build_scroll_page(self)
        self.setStyleSheet(SPINBOX_STYLE)

        self.disable_sleep_check = QCheckBox(tr("settings.toggle.disableDisplaySleep"))
        self.disable_sleep_check.stateChanged.connect(self._save_settings)
        sleep_row = QHBoxLayout()
        sleep_row.addWidget(self.disable_sleep_check)
        sleep_row.addStretch()
        layout.addLayout(sleep_row)
        layout.addSpacing(8)

        device_row = QHBoxLayout()
        device_row.addWidget(QLabel(tr("settings.picker.iosDevice")))
        self.device_combo = QComboBox()
        for device in IOSDevice:
            self.device_combo.addItem(device.label, userData=device.value)
        self.device_combo.setMaximumWidth(300)
        self.device_combo.currentIndexChanged.connect(self._save_settings)
        device_row.addWidget(self.device_combo)
        device_row.addStretch()
        layout.addLayout(device_row)

        resolution_row = QHBoxLayout()
        resolution_row.addWidget(QLabel(tr("settings.picker.adaptiveRes")))
        self.resolution_combo = QComboBox()
        for tier, label in _TIER_LABELS:
            self.resolution_combo.addItem(tr(label), userData=int(tier))
        self.resolution_combo.setCurrentIndex(self.resolution_combo.findData(int(INITIAL_TIER)))
        self.resolution_combo.setToolTip(tr("settings.picker.adaptiveRes.help"))
        self.resolution_combo.currentIndexChanged.connect(self._on_resolution_changed)
        resolution_row.addWidget(self.resolution_combo)
        resolution_row.addStretch()
        layout.addLayout(resolution_row)

        # Aspect ratio, only for the fixed-height tiers
        self.aspect_ratio_row = QWidget()
        aspect_layout = QHBoxLayout(self.aspect_ratio_row)
        aspect_layout.setContentsMargins(0, 0, 0, 0)
        aspect_layout.addWidget(QLabel(tr("settings.picker.aspectRatio")))
        self.aspect_ratio_group = QButtonGroup(self)
        self.aspect_ratio_group.setExclusive(True)
        self.aspect_ratio_buttons = {}
        for aspect, label in _ASPECT_LABELS:
            button = QRadioButton(label)
            self.aspect_ratio_group.addButton(button, int(aspect))
            self.aspect_ratio_buttons[aspect] = button
            aspect_layout.addWidget(button)
        self.aspect_ratio_buttons[INITIAL_ASPECT_RATIO].setChecked(True)
        self.aspect_ratio_group.idToggled.connect(self._on_aspect_ratio_toggled)
        aspect_layout.addStretch()
        layout.addWidget(self.aspect_ratio_row)

        # Custom dimensions, only for the Custom tier
        self.custom_size_row = QWidget()
        custom_layout = QHBoxLayout(self.custom_size_row)
        custom_layout.setContentsMargins(0, 0, 0, 0)
        custom_layout.addWidget(QLabel(tr("settings.stepper.width")))
        self.custom_width_spin = QSpinBox()
        self.custom_width_spin.setRange(1, CUSTOM_DIMENSION_MAX)
        self.custom_width_spin.setValue(DEFAULT_RESOLUTION[0])
        self.custom_width_spin.valueChanged.connect(self._on_custom_size_changed)
        custom_layout.addWidget(self.custom_width_spin)
        custom_layout.addWidget(QLabel(tr("settings.stepper.height")))
        self.custom_height_spin = QSpinBox()
        self.custom_height_spin.setRange(1, CUSTOM_DIMENSION_MAX)
        self.custom_height_spin.setValue(DEFAULT_RESOLUTION[1])
        self.custom_height_spin.valueChanged.connect(self._on_custom_size_changed)
        custom_layout.addWidget(self.custom_height_spin)
        custom_layout.addStretch()
        layout.addWidget(self.custom_size_row)

        refresh_row = QHBoxLayout()
        refresh_row.addWidget(QLabel(tr("settings.picker.refreshRate")))
        self.refresh_rate_group = QButtonGroup(self)
        self.refresh_rate_group.setExclusive(True)
        for rate in REFRESH_RATES:
            button = QPushButton(f"{rate} Hz")
            button.setCheckable(True)
            self.refresh_rate_group.addButton(button, rate)
            refresh_row.addWidget(button)
        self.refresh_rate_group.idClicked.connect(self._save_settings)
        refresh_row.addStretch()
        layout.addLayout(refresh_row)

        layout.addStretch()
        self._update_tier_rows()

    def current_tier(self) -> ResolutionTier:
        return ResolutionTier(self.resolution_combo.currentData())

    def current_aspect_ratio(self) -> AspectRatioTier:
        checked = self.aspect_ratio_group.checkedId()
        if checked == -1:
            return INITIAL_ASPECT_RATIO
        return AspectRatioTier(checked)

    def custom_size(self) -> Tuple[int, int]:
        return self.custom_width_spin.value(), self.custom_height_spin.value()

    def _update_tier_rows(self) -> None:
        tier = self.current_tier()
        self.aspect_ratio_row.setVisible(tier in FIXED_HEIGHTS)
        self.custom_size_row.setVisible(tier is ResolutionTier.CUSTOM)

    def _load_settings(self) -> None:
        """Load widget state from the settings record without writing back."""
        self._loading = True
        widgets = (self.disable_sleep_check, self.device_combo, self.refresh_rate_group)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            apply_bindings_load(self, self._store.settings.to_fields(), self._bindings)
        finally:
            for widget in widgets:
                widget.blockSignals(False)
            self._loading = False

    def _save_settings(self) -> None:
        if self._loading:
            return
        self._store.update_many(collect_bindings_save(self, self._bindings))

    def _set_resolution(self) -> None:
        custom_width, custom_height = self.custom_size()
        width, height = apply_resolution(
            self._store,
            self.current_tier(),
            self.current_aspect_ratio(),
            custom_width,
            custom_height,
            self._screen_width(),
        )
        self.resolution_changed.emit(width, height)
        if self._events is not None:
            self._events.publish(
                EventType.RESOLUTION_CHANGED,
                data={'width': width, 'height': height, 'tier': self.current_tier()},
                source=self,
            )

    def _on_resolution_changed(self, _index: int) -> None:
        self._update_tier_rows()
        self._set_resolution()

    def _on_aspect_ratio_toggled(self, _id: int, checked: bool) -> None:
        # idToggled fires for the button losing the check too
        if checked:
            self._set_resolution()

    def _on_custom_size_changed(self, _value: int) -> None:
        if self.current_tier() is ResolutionTier.CUSTOM:
            self._set_resolution()

    def _on_store_changed(self, name: str, _value: object) -> None:
        if name == '*':
            self._load_settings()
