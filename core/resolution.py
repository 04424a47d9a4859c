"""
Adaptive resolution for the Graphics panel.

The panel exposes two pickers, a resolution tier and an aspect ratio, and
every change to either is turned into a concrete window size here and written
straight into the app's settings. Tier and aspect ratio themselves are UI
state only and are never persisted.

Width for the fixed tiers is ``(height // height_ratio) * width_ratio``. The
division truncates before the multiply.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

from core.logging.logger import get_logger

if TYPE_CHECKING:
    from core.settings.app_settings_store import AppSettingsStore

logger = get_logger(__name__)


class ResolutionTier(IntEnum):
    OFF = 0
    AUTO = 1
    P1080 = 2
    P1440 = 3
    P4K = 4
    CUSTOM = 5


class AspectRatioTier(IntEnum):
    R4_3 = 0
    R16_9 = 1
    R16_10 = 2


DEFAULT_RESOLUTION: Tuple[int, int] = (1920, 1080)

# (width ratio, height ratio)
ASPECT_RATIOS: Dict[AspectRatioTier, Tuple[int, int]] = {
    AspectRatioTier.R4_3: (4, 3),
    AspectRatioTier.R16_9: (16, 9),
    AspectRatioTier.R16_10: (16, 10),
}

FIXED_HEIGHTS: Dict[ResolutionTier, int] = {
    ResolutionTier.P1080: 1080,
    ResolutionTier.P1440: 1440,
    ResolutionTier.P4K: 2160,
}

# Initial picker selections when the Graphics panel opens
INITIAL_TIER = ResolutionTier.P1080
INITIAL_ASPECT_RATIO = AspectRatioTier.R16_9


def _as_tier(value: Any) -> Optional[ResolutionTier]:
    try:
        return ResolutionTier(int(value))
    except (TypeError, ValueError):
        return None


def _as_aspect(value: Any) -> Optional[AspectRatioTier]:
    try:
        return AspectRatioTier(int(value))
    except (TypeError, ValueError):
        return None


def derive_width(height: int, aspect_tier: Any) -> int:
    """Width for ``height`` at the given aspect ratio tier.

    Unknown tiers use 16:9.
    """
    width_ratio, height_ratio = ASPECT_RATIOS.get(
        _as_aspect(aspect_tier), ASPECT_RATIOS[AspectRatioTier.R16_9]
    )
    return (int(height) // height_ratio) * width_ratio


def resolve(tier: Any, aspect_tier: Any, custom_width: int, custom_height: int,
            screen_width: int) -> Tuple[int, int]:
    """Return ``(width, height)`` for a resolution tier.

    Args:
        tier: ResolutionTier (or its int value); unknown values behave as OFF
        aspect_tier: AspectRatioTier for the 1080p/1440p/4K tiers
        custom_width: Used verbatim for CUSTOM, no validation
        custom_height: Used verbatim for CUSTOM, no validation
        screen_width: Width of the current screen's visible area, for AUTO

    AUTO returns the screen width for both dimensions.
    """
    resolved = _as_tier(tier)

    if resolved is ResolutionTier.AUTO:
        return int(screen_width), int(screen_width)
    if resolved in FIXED_HEIGHTS:
        height = FIXED_HEIGHTS[resolved]
        return derive_width(height, aspect_tier), height
    if resolved is ResolutionTier.CUSTOM:
        return custom_width, custom_height
    return DEFAULT_RESOLUTION


def apply_resolution(store: "AppSettingsStore", tier: Any, aspect_tier: Any,
                     custom_width: int, custom_height: int,
                     screen_width: int) -> Tuple[int, int]:
    """Resolve and commit ``window_width``/``window_height`` to the store.

    Returns:
        The ``(width, height)`` written.
    """
    width, height = resolve(tier, aspect_tier, custom_width, custom_height, screen_width)
    store.update_many({'window_width': width, 'window_height': height})
    logger.info(
        "[RESOLUTION] tier=%s aspect=%s -> %dx%d",
        _tier_name(tier), _aspect_name(aspect_tier), width, height,
    )
    return width, height


def _tier_name(tier: Any) -> str:
    resolved = _as_tier(tier)
    return resolved.name if resolved is not None else f"{tier!r}(OFF)"


def _aspect_name(aspect_tier: Any) -> str:
    resolved = _as_aspect(aspect_tier)
    return resolved.name if resolved is not None else f"{aspect_tier!r}(R16_9)"
