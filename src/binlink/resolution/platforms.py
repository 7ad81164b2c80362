"""
binlink.resolution.platforms - Library Bundle Platform Vocabulary
===================================================================

Maps triple components to the strings a library bundle's Info.plist uses for
SupportedPlatform and SupportedPlatformVariant:

    triple OS        → SupportedPlatform         triple environment → SupportedPlatformVariant
    ──────────────     ─────────────────         ──────────────────   ────────────────────────
    macosx / macos   → "macos"                   simulator          → "simulator"
    ios              → "ios"                     macabi             → "maccatalyst"
    tvos             → "tvos"
    watchos          → "watchos"

Every other value maps to None ("no mapping"). That is not an error: a
triple with no platform mapping simply matches no slice.
"""

from __future__ import annotations

from typing import Optional

from binlink.core.enums import Environment, OperatingSystem


_PLATFORMS: dict[str, str] = {
    OperatingSystem.MACOSX.value: "macos",
    OperatingSystem.MACOS.value: "macos",
    OperatingSystem.IOS.value: "ios",
    OperatingSystem.TVOS.value: "tvos",
    OperatingSystem.WATCHOS.value: "watchos",
}

_VARIANTS: dict[str, str] = {
    Environment.SIMULATOR.value: "simulator",
    Environment.MACABI.value: "maccatalyst",
}


def xcframework_platform(os: Optional[str]) -> Optional[str]:
    """SupportedPlatform string for a triple OS name, or None."""
    if os is None:
        return None
    return _PLATFORMS.get(os)


def xcframework_variant(environment: Optional[str]) -> Optional[str]:
    """SupportedPlatformVariant string for a triple environment, or None."""
    if environment is None:
        return None
    return _VARIANTS.get(environment)
