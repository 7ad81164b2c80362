"""
binlink.core.enums - Type-Safe Enumerations
=============================================

This module defines the enumeration types used throughout binlink.

All enums inherit from both `str` and `Enum`, which means:
    - They serialize to strings in JSON/YAML (Pydantic-friendly)
    - They compare equal to plain strings: ArtifactKind.LIBRARY == "library"

Where They Are Used:
    ┌─────────────────────────────────────────────────────────────────┐
    │  TRIPLES                                                        │
    │    OperatingSystem: OS names recognised in a triple             │
    │    Environment: environment names recognised in a triple        │
    ├─────────────────────────────────────────────────────────────────┤
    │  BUNDLES                                                        │
    │    BinaryKind: which metadata schema a bundle uses              │
    │    ArtifactKind: artifact types inside an artifact archive      │
    └─────────────────────────────────────────────────────────────────┘
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Operating System Enumeration
# =============================================================================
# OS names as they appear in the OS component of a target triple. The triple
# parser matches the longest of these as a prefix, so "macosx12.0" reads as
# MACOSX with version "12.0". Anything else is kept as a plain string.
# =============================================================================
class OperatingSystem(str, Enum):
    """Operating system names recognised in a target triple.

    Darwin family (versioned platforms):
        MACOSX, MACOS, IOS, TVOS, WATCHOS, VISIONOS, XROS, DARWIN

    Usage:
        >>> OperatingSystem.MACOSX == "macosx"
        True
    """

    # --- Darwin family ---
    MACOSX = "macosx"
    MACOS = "macos"
    IOS = "ios"
    TVOS = "tvos"
    WATCHOS = "watchos"
    VISIONOS = "visionos"
    XROS = "xros"
    DARWIN = "darwin"

    # --- Everything else ---
    LINUX = "linux"
    WINDOWS = "windows"
    WIN32 = "win32"
    WASI = "wasi"
    OPENBSD = "openbsd"
    FREEBSD = "freebsd"
    ANDROID = "android"
    NONE = "none"

    @classmethod
    def darwin_family(cls) -> frozenset[str]:
        """OS names whose triples carry a platform version."""
        return frozenset(
            os.value
            for os in (
                cls.MACOSX,
                cls.MACOS,
                cls.IOS,
                cls.TVOS,
                cls.WATCHOS,
                cls.VISIONOS,
                cls.XROS,
                cls.DARWIN,
            )
        )


# =============================================================================
# Environment Enumeration
# =============================================================================
class Environment(str, Enum):
    """Environment (fourth triple component) names binlink knows about."""

    SIMULATOR = "simulator"     # iOS/tvOS/watchOS simulator builds
    MACABI = "macabi"           # Mac Catalyst
    GNU = "gnu"
    MUSL = "musl"
    MSVC = "msvc"
    ANDROID = "android"


# =============================================================================
# Binary Kind Enumeration
# =============================================================================
# A binary target's on-disk bundle uses one of two metadata schemas, chosen by
# the bundle directory's extension.
# =============================================================================
class BinaryKind(str, Enum):
    """Metadata schema of a binary target's bundle.

    Mapping:
        Foo.xcframework     → XCFRAMEWORK        (library bundle, Info.plist)
        Foo.artifactbundle  → ARTIFACTS_ARCHIVE  (artifact archive, info.json)
        anything else       → UNKNOWN

    Usage:
        >>> BinaryKind.for_file_extension("artifactbundle")
        <BinaryKind.ARTIFACTS_ARCHIVE: 'artifactsArchive'>
    """

    XCFRAMEWORK = "xcframework"
    ARTIFACTS_ARCHIVE = "artifactsArchive"
    UNKNOWN = "unknown"

    @classmethod
    def for_file_extension(cls, extension: str) -> BinaryKind:
        extension = extension.lstrip(".").lower()
        if extension == "xcframework":
            return cls.XCFRAMEWORK
        if extension == "artifactbundle":
            return cls.ARTIFACTS_ARCHIVE
        return cls.UNKNOWN


# =============================================================================
# Artifact Kind Enumeration
# =============================================================================
# The "type" of an entry in an artifact archive's info.json. Only EXECUTABLE
# and LIBRARY are resolved; the SDK kinds decode so that bundles carrying
# them still load, and are skipped by both archive operations.
# =============================================================================
class ArtifactKind(str, Enum):
    """Artifact types declared in an artifact archive."""

    EXECUTABLE = "executable"
    LIBRARY = "library"
    SWIFT_SDK = "swiftSDK"
    CROSS_COMPILATION_DESTINATION = "crossCompilationDestination"
