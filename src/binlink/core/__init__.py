"""
binlink.core - Foundation Layer
===============================

This module contains the building blocks every other binlink module depends
on:

    - config:      Configuration management (ResolverConfig, MetadataConfig)
    - enums:       Type-safe enumerations (ArtifactKind, BinaryKind, ...)
    - triple:      The Triple value object and its parser
    - models:      Metadata input models and LibraryInfo / ExecutableInfo
    - exceptions:  Custom exception hierarchy for structured error handling

Dependency Rule:
    core/ depends on NOTHING else in the binlink package.
    infrastructure/ and resolution/ depend on core/.
"""

from binlink.core.config import MetadataConfig, ResolverConfig
from binlink.core.enums import ArtifactKind, BinaryKind, Environment, OperatingSystem
from binlink.core.exceptions import (
    BinlinkError,
    ConfigurationError,
    MetadataParseError,
    MissingMetadataField,
    PathError,
    TripleParseError,
)
from binlink.core.models import (
    ArchiveArtifact,
    ArtifactsArchiveMetadata,
    ArtifactVariant,
    ExecutableInfo,
    LibraryInfo,
    LibrarySlice,
    StaticLibraryMetadata,
    XCFrameworkMetadata,
)
from binlink.core.triple import Triple

__all__ = [
    # Config
    "ResolverConfig",
    "MetadataConfig",
    # Enums
    "ArtifactKind",
    "BinaryKind",
    "Environment",
    "OperatingSystem",
    # Triple
    "Triple",
    # Models
    "LibrarySlice",
    "XCFrameworkMetadata",
    "StaticLibraryMetadata",
    "ArtifactVariant",
    "ArchiveArtifact",
    "ArtifactsArchiveMetadata",
    "LibraryInfo",
    "ExecutableInfo",
    # Exceptions
    "BinlinkError",
    "ConfigurationError",
    "TripleParseError",
    "MetadataParseError",
    "PathError",
    "MissingMetadataField",
]
