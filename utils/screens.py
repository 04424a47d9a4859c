"""
Screen metrics for the Graphics panel.

Adaptive "Auto" resolution sizes the app to the visible area of the main
screen, i.e. the screen geometry minus the menu bar and dock.
"""
from typing import Optional
from PySide6.QtCore import QRect
from PySide6.QtGui import QGuiApplication, QScreen
from core.logging.logger import get_logger

logger = get_logger(__name__)

FALLBACK_WIDTH = 1920


def get_main_screen() -> Optional[QScreen]:
    """
    Get the primary screen.

    Returns:
        Primary QScreen object, or None when no GUI application/screen exists
    """
    if QGuiApplication.instance() is None:
        return None
    return QGuiApplication.primaryScreen()


def get_visible_geometry(screen: Optional[QScreen] = None) -> Optional[QRect]:
    """Available geometry of ``screen`` (primary screen when omitted)."""
    screen = screen or get_main_screen()
    if screen is None:
        return None
    geometry = screen.availableGeometry()
    logger.debug("Screen %s visible geometry: %s", screen.name(), geometry)
    return geometry


def get_visible_width(screen: Optional[QScreen] = None) -> int:
    """Width of the main screen's visible area, 1920 if there is no screen."""
    geometry = get_visible_geometry(screen)
    if geometry is None:
        logger.warning("[FALLBACK] No screen available; assuming width %d", FALLBACK_WIDTH)
        return FALLBACK_WIDTH
    return geometry.width()

