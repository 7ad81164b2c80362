"""
binlink.infrastructure.metadata - Bundle Metadata Loaders
===========================================================

Default loaders that turn a bundle's metadata file into the typed models of
binlink.core.models. The resolvers accept any callable with the same
signature, so a build tool that already decoded the metadata can hand it in
directly instead.

    ┌──────────────────────┐  read_bytes   ┌───────────────┐  model_validate
    │  <root>/Info.plist   │ ────────────→ │   plistlib    │ ─────────────→ XCFrameworkMetadata
    │  <root>/info.json    │ ────────────→ │   pydantic    │ ─────────────→ ArtifactsArchiveMetadata
    └──────────────────────┘               └───────────────┘

Every call performs exactly one read and caches nothing. Any failure (missing
file, undecodable bytes, schema mismatch, unsupported schema version) is
reported as MetadataParseError.
"""

from __future__ import annotations

import plistlib
from pathlib import Path
from typing import Callable, Optional
from xml.parsers.expat import ExpatError

import structlog
from pydantic import ValidationError

from binlink.core.config import ResolverConfig, get_default_config
from binlink.core.exceptions import MetadataParseError
from binlink.core.models import ArtifactsArchiveMetadata, XCFrameworkMetadata
from binlink.infrastructure.filesystem import FileSystem


logger = structlog.get_logger()


XCFrameworkLoader = Callable[[FileSystem, Path, ResolverConfig], XCFrameworkMetadata]
ArtifactsArchiveLoader = Callable[[FileSystem, Path, ResolverConfig], ArtifactsArchiveMetadata]


def _read(file_system: FileSystem, path: Path) -> bytes:
    if not file_system.exists(path):
        raise MetadataParseError(
            message=f"Metadata file not found: {path}",
            metadata_path=str(path),
            error_code="METADATA_NOT_FOUND",
        )
    try:
        return file_system.read_bytes(path)
    except OSError as e:
        raise MetadataParseError(
            message=f"Could not read metadata file {path}: {e}",
            metadata_path=str(path),
        ) from e


def _invalid(path: Path, error: ValidationError) -> MetadataParseError:
    return MetadataParseError(
        message=f"Metadata file {path} does not match its schema: {error.error_count()} error(s)",
        metadata_path=str(path),
        details={"errors": error.errors(include_url=False, include_context=False)},
    )


# =============================================================================
# Library Bundle (.xcframework)
# =============================================================================
def load_xcframework_metadata(
    file_system: FileSystem,
    root: Path,
    config: Optional[ResolverConfig] = None,
) -> XCFrameworkMetadata:
    """Load and validate a library bundle's Info.plist.

    Args:
        file_system: Read-only file system to read through.
        root: Absolute path of the .xcframework directory.
        config: Resolver configuration; supplies the metadata file name.

    Returns:
        The decoded metadata, slices in declaration order.

    Raises:
        MetadataParseError: If the file is missing, is not a property list,
            or lacks required keys.
    """
    config = config or get_default_config()
    path = Path(root) / config.metadata.xcframework_info_file
    data = _read(file_system, path)

    try:
        raw = plistlib.loads(data)
    except (
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        # Malformed <date> and similar element bodies.
        AttributeError,
        TypeError,
    ) as e:
        raise MetadataParseError(
            message=f"Metadata file {path} is not a valid property list: {e}",
            metadata_path=str(path),
        ) from e

    try:
        metadata = XCFrameworkMetadata.model_validate(raw)
    except ValidationError as e:
        raise _invalid(path, e) from e

    logger.debug(
        "metadata_loaded",
        component="metadata_loader",
        metadata_path=str(path),
        slices=len(metadata.libraries),
    )
    return metadata


# =============================================================================
# Artifact Archive (.artifactbundle)
# =============================================================================
def load_artifacts_archive_metadata(
    file_system: FileSystem,
    root: Path,
    config: Optional[ResolverConfig] = None,
) -> ArtifactsArchiveMetadata:
    """Load and validate an artifact archive's info.json.

    Args:
        file_system: Read-only file system to read through.
        root: Absolute path of the .artifactbundle directory.
        config: Resolver configuration; supplies the metadata file name and
            the accepted schema versions.

    Returns:
        The decoded metadata, artifacts in declaration order.

    Raises:
        MetadataParseError: If the file is missing, is not valid JSON, does
            not match the schema, or declares an unsupported schemaVersion.
    """
    config = config or get_default_config()
    path = Path(root) / config.metadata.artifacts_archive_info_file
    data = _read(file_system, path)

    try:
        metadata = ArtifactsArchiveMetadata.model_validate_json(data)
    except ValidationError as e:
        raise _invalid(path, e) from e

    supported = config.metadata.supported_schema_versions
    if metadata.schema_version not in supported:
        raise MetadataParseError(
            message=(
                f"Unsupported schemaVersion '{metadata.schema_version}' in {path}; "
                f"supported: {', '.join(supported)}"
            ),
            metadata_path=str(path),
            error_code="UNSUPPORTED_SCHEMA_VERSION",
            details={"schema_version": metadata.schema_version},
        )

    logger.debug(
        "metadata_loaded",
        component="metadata_loader",
        metadata_path=str(path),
        artifacts=len(metadata.artifacts),
    )
    return metadata
