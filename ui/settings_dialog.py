"""
Settings dialog for a single PlayCover app.

Layout:
- Header with the app icon and "<name> Settings"
- Sidebar tab buttons switching a stacked content area
  (Keymapping, Graphics, JB Bypass, Info)
- Reset and OK buttons
"""
from typing import Callable, Optional
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QWidget, QPushButton,
    QLabel, QStackedWidget,
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QPixmap

from core.events import EventSystem, EventType
from core.i18n import tr
from core.logging.logger import get_logger
from core.play_app import PlayApp
from ui.tabs import GraphicsTab, InfoTab, JBBypassTab, KeymappingTab
from ui.toast import ToastNotifier, ToastType
from utils.screens import get_visible_width

logger = get_logger(__name__)

ICON_SIZE = 33


class TabButton(QPushButton):
    """Checkable sidebar button selecting one settings panel."""

    def __init__(self, text: str, parent: Optional[QWidget] = None):
        super().__init__(text, parent)
        self.setCheckable(True)
        self.setObjectName("tabButton")
        self.setMinimumHeight(36)


class AppSettingsDialog(QDialog):
    """
    Per-app settings dialog.

    Panels edit ``app.settings`` as the user interacts; there is no apply
    step. Reset restores the defaults, announces it with a toast and closes.
    """

    def __init__(self, app: PlayApp, notifier: ToastNotifier,
                 event_system: Optional[EventSystem] = None,
                 screen_width_provider: Callable[[], int] = get_visible_width,
                 parent: Optional[QWidget] = None):
        """
        Args:
            app: The app being configured
            notifier: Receives the "reset completed" toast
            event_system: Optional bus for settings/resolution events
            screen_width_provider: Visible screen width for Auto resolution
            parent: Parent widget
        """
        super().__init__(parent)

        self._app = app
        self._notifier = notifier
        self._events = event_system
        self._screen_width_provider = screen_width_provider

        self.setWindowTitle(f"{app.name} {tr('settings.title')}")
        self.setMinimumSize(450, 200)

        self._setup_ui()
        self._connect_signals()

        logger.info("Settings dialog created for %s", app.info.bundle_identifier)

    @property
    def app(self) -> PlayApp:
        return self._app

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        self.icon_label = QLabel()
        self.icon_label.setFixedSize(ICON_SIZE, ICON_SIZE)
        pixmap = self._load_icon()
        if pixmap is None:
            self.icon_label.hide()
        else:
            self.icon_label.setPixmap(pixmap)
        header.addWidget(self.icon_label)

        self.title_label = QLabel(f"{self._app.name} {tr('settings.title')}")
        title_font = QFont()
        title_font.setPointSize(15)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        header.addWidget(self.title_label)
        header.addStretch()
        layout.addLayout(header)

        content = QHBoxLayout()

        sidebar = QWidget()
        sidebar.setObjectName("sidebar")
        sidebar.setFixedWidth(140)
        sidebar_layout = QVBoxLayout(sidebar)
        sidebar_layout.setContentsMargins(0, 0, 0, 0)
        sidebar_layout.setSpacing(4)

        self.keymapping_tab_btn = TabButton(tr("settings.tab.km"))
        self.graphics_tab_btn = TabButton(tr("settings.tab.graphics"))
        self.jb_bypass_tab_btn = TabButton(tr("settings.tab.jbBypass"))
        self.info_tab_btn = TabButton(tr("settings.tab.info"))
        self.tab_buttons = [
            self.keymapping_tab_btn,
            self.graphics_tab_btn,
            self.jb_bypass_tab_btn,
            self.info_tab_btn,
        ]
        for btn in self.tab_buttons:
            sidebar_layout.addWidget(btn)
        sidebar_layout.addStretch()

        self.content_stack = QStackedWidget()
        self.content_stack.setObjectName("contentArea")

        store = self._app.settings
        self.keymapping_tab = KeymappingTab(store)
        self.graphics_tab = GraphicsTab(
            store,
            event_system=self._events,
            screen_width_provider=self._screen_width_provider,
        )
        self.jb_bypass_tab = JBBypassTab(store)
        self.info_tab = InfoTab(self._app.info)

        for tab in (self.keymapping_tab, self.graphics_tab, self.jb_bypass_tab, self.info_tab):
            self.content_stack.addWidget(tab)

        content.addWidget(sidebar)
        content.addWidget(self.content_stack, 1)
        layout.addLayout(content, 1)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.reset_btn = QPushButton(tr("settings.reset"))
        self.reset_btn.setAutoDefault(False)
        buttons.addWidget(self.reset_btn)
        self.ok_btn = QPushButton(tr("button.OK"))
        self.ok_btn.setDefault(True)
        buttons.addWidget(self.ok_btn)
        layout.addLayout(buttons)

        self.keymapping_tab_btn.setChecked(True)
        self.content_stack.setCurrentIndex(0)

    def _load_icon(self) -> Optional[QPixmap]:
        icon_path = self._app.icon_path
        if icon_path is None:
            return None
        pixmap = QPixmap(str(icon_path))
        if pixmap.isNull():
            logger.warning("[FALLBACK] Could not load app icon %s", icon_path)
            return None
        return pixmap.scaled(
            ICON_SIZE, ICON_SIZE,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )

    def _connect_signals(self) -> None:
        for index, btn in enumerate(self.tab_buttons):
            btn.clicked.connect(lambda _checked=False, i=index: self.switch_tab(i))
        self.reset_btn.clicked.connect(self._on_reset_clicked)
        self.ok_btn.clicked.connect(self.accept)
        if self._events is not None:
            self._app.settings.settings_changed.connect(self._publish_settings_changed)

    def switch_tab(self, index: int) -> None:
        """Show panel ``index`` and check its sidebar button."""
        for i, btn in enumerate(self.tab_buttons):
            btn.setChecked(i == index)
        self.content_stack.setCurrentIndex(index)
        logger.debug("Switched to tab %d", index)

    def _on_reset_clicked(self) -> None:
        """Reset the app's settings, announce it and close."""
        self._app.settings.reset()
        self._notifier.show_toast(ToastType.NOTICE, tr("settings.resetCompleted"))
        if self._events is not None:
            self._events.publish(
                EventType.SETTINGS_RESET,
                data=self._app.info.bundle_identifier,
                source=self,
            )
        self.accept()

    def _publish_settings_changed(self, name: str, value: object) -> None:
        self._events.publish(
            EventType.SETTINGS_CHANGED,
            data={'bundle_identifier': self._app.info.bundle_identifier, 'key': name, 'value': value},
            source=self,
        )
