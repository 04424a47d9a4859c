"""
Toast notifications.

``ToastNotifier`` is what the rest of the app talks to: ``show_toast`` is
fire-and-forget and only publishes ``toast.requested`` on the event bus.
``ToastPresenter`` listens for that event and puts a ``ToastPopup`` on
screen, so code that raises toasts never needs a widget.
"""
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from PySide6.QtWidgets import QLabel, QHBoxLayout, QVBoxLayout, QWidget, QGraphicsDropShadowEffect
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor

from core.events import Event, EventSystem, EventType
from core.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DURATION_MS = 3000


class ToastType(Enum):
    NOTICE = "notice"
    ERROR = "error"
    NETWORK = "network"


@dataclass(frozen=True)
class Toast:
    toast_type: ToastType
    details: str
    timestamp: float = field(default_factory=time.time)


class ToastNotifier:
    """Publishes toasts on the event bus."""

    def __init__(self, event_system: EventSystem):
        self._events = event_system

    def show_toast(self, toast_type: ToastType, details: str) -> Toast:
        toast = Toast(toast_type, details)
        logger.info("Toast (%s): %s", toast_type.value, details)
        self._events.publish(EventType.TOAST_REQUESTED, data=toast, source=self)
        return toast


_ICONS = {
    ToastType.NOTICE: ("ℹ", "rgba(100, 180, 255, 255)"),
    ToastType.ERROR: ("✕", "rgba(255, 100, 100, 255)"),
    ToastType.NETWORK: ("⇅", "rgba(255, 200, 80, 255)"),
}


class ToastPopup(QWidget):
    """Dark glass, frameless, self-closing notification.

    Unlike a dialog it never takes focus or blocks the caller.
    """

    def __init__(self, toast: Toast, parent: Optional[QWidget] = None,
                 duration_ms: int = DEFAULT_DURATION_MS):
        super().__init__(parent)
        self.toast = toast

        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint |
            Qt.WindowType.Tool |
            Qt.WindowType.WindowStaysOnTopHint
        )
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)

        self._setup_ui()

        if duration_ms > 0:
            QTimer.singleShot(duration_ms, self.close)

    def _setup_ui(self) -> None:
        container = QWidget(self)
        container.setObjectName("toastContainer")
        container.setStyleSheet("""
            #toastContainer {
                background-color: rgba(25, 25, 30, 235);
                border: 1px solid rgba(80, 80, 90, 180);
                border-radius: 10px;
            }
        """)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(20)
        shadow.setColor(QColor(0, 0, 0, 150))
        shadow.setOffset(0, 4)
        container.setGraphicsEffect(shadow)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(container)

        row = QHBoxLayout(container)
        row.setContentsMargins(16, 10, 16, 10)
        row.setSpacing(8)

        glyph, color = _ICONS[self.toast.toast_type]
        self.icon_label = QLabel(glyph)
        self.icon_label.setStyleSheet(f"font-size: 16px; color: {color};")
        row.addWidget(self.icon_label)

        self.message_label = QLabel(self.toast.details)
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet("font-size: 12px; color: rgba(230, 230, 235, 240);")
        row.addWidget(self.message_label, 1)

        self.setMinimumWidth(280)
        self.adjustSize()

    def place(self, anchor: Optional[QWidget]) -> None:
        """Center horizontally near the bottom of ``anchor`` (or its screen)."""
        if anchor is not None and anchor.isVisible():
            area = anchor.frameGeometry()
        else:
            screen = self.screen()
            if screen is None:
                return
            area = screen.availableGeometry()
        x = area.x() + (area.width() - self.width()) // 2
        y = area.y() + area.height() - self.height() - 40
        self.move(x, y)


class ToastPresenter:
    """Shows a ToastPopup for every ``toast.requested`` event."""

    def __init__(self, event_system: EventSystem, anchor: Optional[QWidget] = None,
                 duration_ms: int = DEFAULT_DURATION_MS):
        self._events = event_system
        self._anchor = anchor
        self._duration_ms = duration_ms
        self._popups: List[ToastPopup] = []
        self._subscription = event_system.subscribe(EventType.TOAST_REQUESTED, self._on_toast)

    @property
    def popups(self) -> List[ToastPopup]:
        return list(self._popups)

    def set_anchor(self, anchor: Optional[QWidget]) -> None:
        self._anchor = anchor

    def _on_toast(self, event: Event) -> None:
        toast = event.data
        if not isinstance(toast, Toast):
            logger.warning("Ignoring toast event without Toast payload: %r", toast)
            return
        popup = ToastPopup(toast, duration_ms=self._duration_ms)
        popup.destroyed.connect(lambda *_args, p=popup: self._forget(p))
        popup.place(self._anchor)
        popup.show()
        self._popups.append(popup)

    def _forget(self, popup: ToastPopup) -> None:
        if popup in self._popups:
            self._popups.remove(popup)

    def close(self) -> None:
        self._events.unsubscribe(self._subscription)
        for popup in list(self._popups):
            popup.close()
        self._popups.clear()
