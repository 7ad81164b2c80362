"""
Bundle Resolution Example — One Library Bundle, One Artifact Archive
======================================================================

This example stages two bundles in memory and resolves them for a few
triples, the way a build system's link step would:

    - Foo.xcframework:      macOS and iOS-simulator slices
    - Tools.artifactbundle: a "lint" executable built per architecture

Usage:
    python examples/resolve_bundles.py
"""

from __future__ import annotations

import json
import plistlib

from binlink import BinaryTarget
from binlink.core.exceptions import BinlinkError
from binlink.infrastructure.filesystem import InMemoryFileSystem


def stage_bundles(fs: InMemoryFileSystem) -> None:
    """Write the two bundles' metadata files."""
    fs.write_file(
        "/deps/Foo.xcframework/Info.plist",
        plistlib.dumps(
            {
                "AvailableLibraries": [
                    {
                        "LibraryIdentifier": "macos-arm64_x86_64",
                        "LibraryPath": "libFoo.a",
                        "HeadersPath": "Headers",
                        "SupportedArchitectures": ["arm64", "x86_64"],
                        "SupportedPlatform": "macos",
                    },
                    {
                        "LibraryIdentifier": "ios-arm64_x86_64-simulator",
                        "LibraryPath": "libFoo.a",
                        "SupportedArchitectures": ["arm64", "x86_64"],
                        "SupportedPlatform": "ios",
                        "SupportedPlatformVariant": "simulator",
                    },
                ],
                "CFBundlePackageType": "XFWK",
                "XCFrameworkFormatVersion": "1.0",
            }
        ),
    )
    fs.write_file(
        "/deps/Tools.artifactbundle/info.json",
        json.dumps(
            {
                "schemaVersion": "1.0",
                "artifacts": {
                    "lint": {
                        "type": "executable",
                        "version": "0.50.3",
                        "variants": [
                            {"path": "lint-x86_64/bin/lint", "supportedTriples": ["x86_64-apple-macosx10.9"]},
                            {"path": "lint-arm64/bin/lint", "supportedTriples": ["arm64-apple-macosx11.0"]},
                        ],
                    }
                },
            }
        ),
    )


def main() -> None:
    fs = InMemoryFileSystem()
    stage_bundles(fs)

    foo = BinaryTarget("Foo", "/deps/Foo.xcframework", file_system=fs)
    tools = BinaryTarget("Tools", "/deps/Tools.artifactbundle", file_system=fs)

    for triple in ("arm64-apple-ios17.0-simulator", "x86_64-apple-macosx14.0", "x86_64-unknown-linux-gnu"):
        print(f"\n{triple}")
        try:
            libraries = foo.libraries(triple)
            executables = tools.resolve_executables(triple)
        except BinlinkError as e:
            print(f"  [{e.error_code}] {e.message}")
            continue

        if not libraries and not executables:
            print("  nothing applies")
        for library in libraries:
            print(f"  link    {library.library_path}")
            for headers in library.headers_paths:
                print(f"  headers {headers}")
        for executable in executables:
            triples = ", ".join(str(t) for t in executable.supported_triples)
            print(f"  run     {executable.name}: {executable.executable_path} ({triples})")


if __name__ == "__main__":
    main()
