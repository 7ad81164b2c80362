"""
binlink.core.models - Core Data Models
========================================

This module defines the Pydantic models that flow through binlink. They fall
into two groups: typed metadata read from a bundle (inputs), and the
descriptors handed back to the build system (outputs).

Model Map:
    Library bundle (.xcframework, Info.plist)
        XCFrameworkMetadata
            └── LibrarySlice            one binary slice per platform/variant

    Artifact archive (.artifactbundle, info.json)
        ArtifactsArchiveMetadata
            └── ArchiveArtifact         keyed by artifact name
                    └── ArtifactVariant one build per set of triples
                            └── StaticLibraryMetadata

    Outputs
        LibraryInfo                     what to link, where its headers are
        ExecutableInfo                  which tool binary to run

Data Flow:
    ┌──────────────┐   metadata models   ┌──────────────┐   LibraryInfo /
    │  Metadata    │ ──────────────────→ │  Resolvers   │ ─ ExecutableInfo →
    │  loaders     │                     │  (matching)  │   build system
    └──────────────┘                     └──────────────┘

Design Principles:
    1. Input models mirror the on-disk keys through aliases, so validation
       doubles as schema checking.
    2. Output models are frozen snapshots; a resolver builds them fresh on
       every call and never caches them.
    3. Declared paths stay as strings in the input models. They are validated
       against their base directory only at resolution time.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from binlink.core.enums import ArtifactKind
from binlink.core.triple import Triple


# =============================================================================
# Library Bundle Schema
# =============================================================================
# One entry of Info.plist's AvailableLibraries array:
#
#   <dict>
#     <key>LibraryIdentifier</key>       <string>ios-arm64_x86_64-simulator</string>
#     <key>LibraryPath</key>             <string>libFoo.a</string>
#     <key>HeadersPath</key>             <string>Headers</string>
#     <key>SupportedArchitectures</key>  <array><string>arm64</string>...</array>
#     <key>SupportedPlatform</key>       <string>ios</string>
#     <key>SupportedPlatformVariant</key><string>simulator</string>
#   </dict>
# =============================================================================
class LibrarySlice(BaseModel):
    """One architecture/variant-specific slice of a library bundle.

    Attributes:
        library_identifier: Subdirectory of the bundle holding this slice.
        library_path: Library file, relative to the slice subdirectory.
        headers_path: Optional headers directory, relative to the slice
            subdirectory.
        architectures: Architecture names the slice's binary contains.
        platform: Platform string, e.g. "macos", "ios".
        variant: Optional platform variant, e.g. "simulator".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    library_identifier: str = Field(alias="LibraryIdentifier")
    library_path: str = Field(alias="LibraryPath")
    headers_path: Optional[str] = Field(default=None, alias="HeadersPath")
    architectures: frozenset[str] = Field(alias="SupportedArchitectures")
    platform: str = Field(alias="SupportedPlatform")
    variant: Optional[str] = Field(default=None, alias="SupportedPlatformVariant")


class XCFrameworkMetadata(BaseModel):
    """Decoded Info.plist of a library bundle.

    `libraries` keeps declaration order; the resolver relies on it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    libraries: tuple[LibrarySlice, ...] = Field(alias="AvailableLibraries")


# =============================================================================
# Artifact Archive Schema
# =============================================================================
# info.json of an artifact archive:
#
#   {
#     "schemaVersion": "1.0",
#     "artifacts": {
#       "tool": {
#         "type": "executable",
#         "version": "1.2.0",
#         "variants": [
#           {"path": "tool-macos/bin/tool",
#            "supportedTriples": ["arm64-apple-macosx", "x86_64-apple-macosx"]}
#         ]
#       },
#       "Foo": {
#         "type": "staticLibrary",
#         "variants": [
#           {"path": "linux/libFoo.a",
#            "supportedTriples": ["x86_64-unknown-linux-gnu"],
#            "staticLibraryMetadata": {"headerPaths": ["include"],
#                                      "moduleMapPath": "include/module.modulemap"}}
#         ]
#       }
#     }
#   }
# =============================================================================
class StaticLibraryMetadata(BaseModel):
    """Header and module-map declarations of a library variant."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    header_paths: tuple[str, ...] = Field(default=(), alias="headerPaths")
    module_map_path: Optional[str] = Field(default=None, alias="moduleMapPath")


class ArtifactVariant(BaseModel):
    """One concrete build of an artifact.

    Attributes:
        path: Binary path, relative to the bundle root.
        supported_triples: Triples this build applies to. None when the
            metadata omits the key entirely, which is different from an
            empty list.
        library_metadata: Header/module-map declarations (libraries only).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    supported_triples: Optional[tuple[Triple, ...]] = Field(
        default=None,
        alias="supportedTriples",
    )
    library_metadata: Optional[StaticLibraryMetadata] = Field(
        default=None,
        validation_alias=AliasChoices(
            "staticLibraryMetadata",
            "libraryMetadata",
            "library_metadata",
        ),
    )


class ArchiveArtifact(BaseModel):
    """An artifact entry: its kind and its ordered variants."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ArtifactKind = Field(alias="type")
    version: Optional[str] = None
    variants: tuple[ArtifactVariant, ...] = ()

    @field_validator("kind", mode="before")
    @classmethod
    def _accept_static_library(cls, value: Any) -> Any:
        # Archives written by current toolchains spell the library kind
        # "staticLibrary".
        if value == "staticLibrary":
            return ArtifactKind.LIBRARY
        return value


class ArtifactsArchiveMetadata(BaseModel):
    """Decoded info.json of an artifact archive.

    `artifacts` maps artifact name to its entry, in declaration order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_version: str = Field(alias="schemaVersion")
    artifacts: dict[str, ArchiveArtifact] = Field(default_factory=dict)


# =============================================================================
# Output Descriptors
# =============================================================================
class LibraryInfo(BaseModel):
    """A library the build system should link.

    Attributes:
        library_path: Absolute path to the library binary.
        headers_paths: Absolute header directories, in declaration order.
        module_map_path: Absolute module map path, if the bundle declares one.
    """

    model_config = ConfigDict(frozen=True)

    library_path: Path
    headers_paths: tuple[Path, ...] = ()
    module_map_path: Optional[Path] = None


class ExecutableInfo(BaseModel):
    """A prebuilt executable that applies to the requested triple.

    Attributes:
        name: Artifact name (the key in info.json).
        executable_path: Absolute path to the executable.
        supported_triples: The declared triples of the variant that are
            version-equivalent to the request. Never the full declared list
            unless every entry matched.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    executable_path: Path
    supported_triples: tuple[Triple, ...]
