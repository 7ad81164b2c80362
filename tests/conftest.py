"""
Shared Test Fixtures for binlink
==================================

Bundles are staged in an InMemoryFileSystem so resolution tests never touch
disk. Fixtures are organized by layer:

    1. Configuration fixtures
    2. File system fixtures
    3. Bundle builders (library bundle, artifact archive)
    4. Prebuilt bundles
"""

from __future__ import annotations

import json
import plistlib
from pathlib import Path
from typing import Any, Optional

import pytest

from binlink.core.config import ResolverConfig
from binlink.infrastructure.filesystem import InMemoryFileSystem


def library_slice(
    identifier: str,
    platform: str,
    architectures: list[str],
    variant: Optional[str] = None,
    headers_path: Optional[str] = None,
    library_path: str = "libFoo.a",
) -> dict[str, Any]:
    """Info.plist AvailableLibraries entry. Optional keys are omitted when None."""
    entry: dict[str, Any] = {
        "LibraryIdentifier": identifier,
        "LibraryPath": library_path,
        "SupportedArchitectures": architectures,
        "SupportedPlatform": platform,
    }
    if variant is not None:
        entry["SupportedPlatformVariant"] = variant
    if headers_path is not None:
        entry["HeadersPath"] = headers_path
    return entry


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture
def config():
    """binlink configuration with defaults."""
    return ResolverConfig()


# =============================================================================
# File System
# =============================================================================

@pytest.fixture
def file_system():
    """Fresh, empty InMemoryFileSystem."""
    return InMemoryFileSystem()


@pytest.fixture
def xcframework_root() -> Path:
    return Path("/deps/Foo.xcframework")


@pytest.fixture
def archive_root() -> Path:
    return Path("/deps/Tools.artifactbundle")


# =============================================================================
# Bundle Builders
# =============================================================================

@pytest.fixture
def write_xcframework(file_system, xcframework_root):
    """Write an Info.plist listing the given slices; returns the bundle root."""

    def _write(
        libraries: list[dict[str, Any]],
        root: Optional[Path] = None,
        fmt: plistlib.PlistFormat = plistlib.FMT_XML,
    ) -> Path:
        root = root or xcframework_root
        document = {
            "AvailableLibraries": libraries,
            "CFBundlePackageType": "XFWK",
            "XCFrameworkFormatVersion": "1.0",
        }
        file_system.write_file(root / "Info.plist", plistlib.dumps(document, fmt=fmt))
        return root

    return _write


@pytest.fixture
def write_archive(file_system, archive_root):
    """Write an info.json with the given artifacts; returns the bundle root."""

    def _write(
        artifacts: dict[str, Any],
        root: Optional[Path] = None,
        schema_version: str = "1.0",
    ) -> Path:
        root = root or archive_root
        document = {"schemaVersion": schema_version, "artifacts": artifacts}
        file_system.write_file(root / "info.json", json.dumps(document))
        return root

    return _write


# =============================================================================
# Prebuilt Bundles
# =============================================================================

@pytest.fixture
def standard_xcframework(write_xcframework):
    """Library bundle with macos and ios-simulator slices for x86_64 and arm64,
    plus an arm64 iOS device slice and a Mac Catalyst slice.

    The simulator slice is listed before the device slice on purpose.
    """
    return write_xcframework(
        [
            library_slice(
                "macos-arm64_x86_64",
                "macos",
                ["arm64", "x86_64"],
                headers_path="Headers",
            ),
            library_slice(
                "ios-arm64_x86_64-simulator",
                "ios",
                ["arm64", "x86_64"],
                variant="simulator",
            ),
            library_slice(
                "ios-arm64",
                "ios",
                ["arm64"],
                headers_path="Headers",
            ),
            library_slice(
                "ios-arm64_x86_64-maccatalyst",
                "ios",
                ["arm64", "x86_64"],
                variant="maccatalyst",
            ),
        ]
    )


@pytest.fixture
def tool_archive(write_archive):
    """Artifact archive with one executable, "tool", built per architecture."""
    return write_archive(
        {
            "tool": {
                "type": "executable",
                "version": "1.0.0",
                "variants": [
                    {
                        "path": "tool-x86_64/bin/tool",
                        "supportedTriples": ["x86_64-apple-macosx10.9"],
                    },
                    {
                        "path": "tool-arm64/bin/tool",
                        "supportedTriples": ["arm64-apple-macosx11.0"],
                    },
                ],
            },
        }
    )
