"""
Bundle metadata for a managed app, read from its ``Info.plist``.
"""
from __future__ import annotations

import plistlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.logging.logger import get_logger

logger = get_logger(__name__)

INFO_PLIST = "Info.plist"


class AppInfoError(ValueError):
    """The app bundle has no readable Info.plist."""


@dataclass(frozen=True)
class AppInfo:
    """Read-only view of the Info.plist fields shown in the Info panel."""
    display_name: str = ""
    bundle_name: str = ""
    bundle_identifier: str = ""
    bundle_version: str = ""
    executable_name: str = ""
    minimum_os_version: str = ""
    url: str = ""
    is_game: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_plist(cls, data: Dict[str, Any], url: str = "") -> "AppInfo":
        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        category = text("LSApplicationCategoryType")
        return cls(
            display_name=text("CFBundleDisplayName"),
            bundle_name=text("CFBundleName"),
            bundle_identifier=text("CFBundleIdentifier"),
            bundle_version=text("CFBundleShortVersionString"),
            executable_name=text("CFBundleExecutable"),
            minimum_os_version=text("MinimumOSVersion"),
            url=url,
            is_game="games" in category.lower(),
            raw=dict(data),
        )

    @classmethod
    def from_bundle(cls, bundle_path: Path) -> "AppInfo":
        """Parse ``<bundle>/Info.plist`` (XML or binary).

        Raises:
            AppInfoError: the plist is missing, unreadable or not a dictionary
        """
        bundle = Path(bundle_path)
        plist_path = bundle / INFO_PLIST
        try:
            with open(plist_path, "rb") as f:
                data = plistlib.load(f)
        except FileNotFoundError as exc:
            raise AppInfoError(f"No {INFO_PLIST} in {bundle}") from exc
        except (OSError, plistlib.InvalidFileException, ValueError) as exc:
            raise AppInfoError(f"Unreadable {INFO_PLIST} in {bundle}: {exc}") from exc

        if not isinstance(data, dict):
            raise AppInfoError(f"{plist_path} does not contain a dictionary")

        info = cls.from_plist(data, url=str(bundle.resolve()))
        logger.debug("Loaded app info for %s (%s)", info.bundle_identifier, bundle)
        return info

    @property
    def name(self) -> str:
        """Best human-readable name for headers."""
        return self.display_name or self.bundle_name or self.executable_name

    def icon_names(self) -> List[str]:
        """Icon file base names declared by the bundle, most specific last."""
        names: List[str] = []
        icons = self.raw.get("CFBundleIcons")
        if isinstance(icons, dict):
            primary = icons.get("CFBundlePrimaryIcon")
            if isinstance(primary, dict):
                names.extend(str(n) for n in primary.get("CFBundleIconFiles", []) or [])
        names.extend(str(n) for n in self.raw.get("CFBundleIconFiles", []) or [])
        icon_file = self.raw.get("CFBundleIconFile")
        if icon_file:
            names.append(str(icon_file))
        return names


def find_icon(bundle_path: Path, info: AppInfo) -> Optional[Path]:
    """Return the largest declared PNG icon in the bundle, if any."""
    bundle = Path(bundle_path)
    candidates: List[Path] = []
    for name in info.icon_names():
        stem = name[:-4] if name.lower().endswith(".png") else name
        candidates.extend(sorted(bundle.glob(f"{stem}*.png")))
    existing = [p for p in candidates if p.is_file()]
    if not existing:
        return None
    return max(existing, key=lambda p: p.stat().st_size)
