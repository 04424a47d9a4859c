"""
Localized UI strings.

Panels refer to strings by key (``settings.tab.km``) and look them up with
``tr()``. Only the English table ships. A key missing from the
table is returned unchanged.
"""
from typing import Dict

DEFAULT_LANGUAGE = "en"

_STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "settings.title": "Settings",
        "settings.tab.km": "Keymapping",
        "settings.tab.graphics": "Graphics",
        "settings.tab.jbBypass": "JB Bypass",
        "settings.tab.info": "Info",
        "settings.reset": "Reset Settings",
        "settings.resetCompleted": "Settings have been reset to their defaults",
        "button.OK": "OK",

        "settings.toggle.km": "Keymapping",
        "settings.toggle.km.help": "Translate keyboard and mouse input into touch input using the app's keymap",
        "settings.toggle.mm": "Mouse mapping",
        "settings.slider.mouseSensitivity": "Mouse sensitivity: ",

        "settings.toggle.disableDisplaySleep": "Disable display sleep",
        "settings.picker.iosDevice": "iOS Device",
        "settings.picker.adaptiveRes": "Adaptive display resolution",
        "settings.picker.adaptiveRes.0": "Off",
        "settings.picker.adaptiveRes.1": "Auto",
        "settings.picker.adaptiveRes.help": "Render the app at a resolution that matches your display instead of the device's native resolution",
        "settings.picker.aspectRatio": "Aspect Ratio:",
        "settings.stepper.width": "Width:",
        "settings.stepper.height": "Height:",
        "settings.picker.refreshRate": "Screen refresh rate",

        "settings.toggle.jbBypass": "Enable jailbreak bypass",

        "settings.info.displayName": "Display name:",
        "settings.info.bundleName": "Bundle name:",
        "settings.info.bundleIdentifier": "Bundle identifier:",
        "settings.info.bundleVersion": "Bundle version:",
        "settings.info.executableName": "Executable name:",
        "settings.info.minimumOSVersion": "Minimum OS version:",
        "settings.info.url": "URL:",
        "settings.info.isGame": "Is Game:",
        "settings.info.yes": "Yes",
        "settings.info.no": "No",
    },
}


def tr(key: str) -> str:
    """Return the localized string for ``key``."""
    return _STRINGS[DEFAULT_LANGUAGE].get(key, key)
