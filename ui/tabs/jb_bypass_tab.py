"""
Jailbreak bypass panel.
"""
from typing import Optional
from PySide6.QtWidgets import QWidget, QHBoxLayout, QCheckBox

from core.i18n import tr
from core.logging.logger import get_logger
from core.settings.app_settings_store import AppSettingsStore
from ui.tabs.shared_styles import build_scroll_page

logger = get_logger(__name__)


class JBBypassTab(QWidget):
    """Single toggle hiding jailbreak indicators from the app."""

    def __init__(self, store: AppSettingsStore, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._store = store
        self._loading = False

        _, layout = build_scroll_page(self)
        row = QHBoxLayout()
        self.bypass_check = QCheckBox(tr("settings.toggle.jbBypass"))
        self.bypass_check.stateChanged.connect(self._save_settings)
        row.addWidget(self.bypass_check)
        row.addStretch()
        layout.addLayout(row)
        layout.addStretch()

        self._load_settings()
        self._store.settings_changed.connect(self._on_store_changed)

    def _load_settings(self) -> None:
        self._loading = True
        self.bypass_check.blockSignals(True)
        try:
            self.bypass_check.setChecked(self._store.settings.bypass)
        finally:
            self.bypass_check.blockSignals(False)
            self._loading = False

    def _save_settings(self) -> None:
        if self._loading:
            return
        self._store.update('bypass', self.bypass_check.isChecked())

    def _on_store_changed(self, name: str, _value: object) -> None:
        if name == '*':
            self._load_settings()
