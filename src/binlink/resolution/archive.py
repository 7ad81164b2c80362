"""
binlink.resolution.archive - Artifact Archive Resolution
==========================================================

Resolves the artifacts of an .artifactbundle against a requested triple.
Two operations with deliberately different policies:

    ┌──────────────────────┬──────────────────────────┬─────────────────────────┐
    │                      │ resolve_executables      │ resolve_libraries       │
    ├──────────────────────┼──────────────────────────┼─────────────────────────┤
    │ artifacts considered │ type == executable       │ type == library         │
    │ variants emitted     │ every matching variant   │ first matching variant  │
    │ supportedTriples     │ required (else           │ optional (missing =     │
    │   missing            │   MissingMetadataField)  │   variant never matches)│
    │ output triples       │ only the matching subset │ n/a                     │
    └──────────────────────┴──────────────────────────┴─────────────────────────┘

A declared triple matches when it is version-equivalent to the request, so a
variant built for arm64-apple-macosx11.0 serves a request for
arm64-apple-macosx12.0. Every path resolves against the bundle root.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import structlog

from binlink.core.config import ResolverConfig, get_default_config
from binlink.core.enums import ArtifactKind
from binlink.core.exceptions import MissingMetadataField
from binlink.core.models import (
    ArtifactsArchiveMetadata,
    ArtifactVariant,
    ExecutableInfo,
    LibraryInfo,
)
from binlink.core.triple import Triple
from binlink.infrastructure.filesystem import FileSystem, LocalFileSystem
from binlink.infrastructure.metadata import (
    ArtifactsArchiveLoader,
    load_artifacts_archive_metadata,
)
from binlink.resolution.normalizer import normalize
from binlink.resolution.paths import require_absolute, resolve_relative


logger = structlog.get_logger()


def _load(
    bundle_root: Union[Path, str],
    file_system: Optional[FileSystem],
    config: Optional[ResolverConfig],
    loader: Optional[ArtifactsArchiveLoader],
) -> tuple[Path, ArtifactsArchiveMetadata]:
    root = require_absolute(bundle_root)
    loader = loader or load_artifacts_archive_metadata
    metadata = loader(file_system or LocalFileSystem(), root, config or get_default_config())
    return root, metadata


def _matching_triples(variant: ArtifactVariant, requested: Triple) -> tuple[Triple, ...]:
    return tuple(
        declared
        for declared in variant.supported_triples or ()
        if normalize(declared) == requested
    )


# =============================================================================
# Executables
# =============================================================================
def resolve_executables(
    bundle_root: Union[Path, str],
    triple: Triple,
    file_system: Optional[FileSystem] = None,
    config: Optional[ResolverConfig] = None,
    loader: Optional[ArtifactsArchiveLoader] = None,
) -> list[ExecutableInfo]:
    """Resolve every executable variant that applies to `triple`.

    Each variant with at least one version-equivalent declared triple yields
    one ExecutableInfo carrying just those matching triples. Variants with no
    match are omitted.

    Args:
        bundle_root: Absolute path of the .artifactbundle directory.
        triple: The triple currently being built.
        file_system: Where to read metadata from. Defaults to local disk.
        config: Resolver configuration. Defaults to get_default_config().
        loader: Metadata loader. Defaults to load_artifacts_archive_metadata.

    Returns:
        ExecutableInfo per matching variant, in declaration order. May be empty.

    Raises:
        MissingMetadataField: If any executable variant lacks supportedTriples.
        MetadataParseError: If the bundle's metadata cannot be loaded.
        PathError: If the bundle root or a matching variant's path is invalid.
        TripleParseError: If a triple cannot be normalized.
    """
    root, metadata = _load(bundle_root, file_system, config, loader)
    log = logger.bind(component="archive_resolver", bundle=str(root), triple=str(triple))
    requested = normalize(triple)

    executables = [
        (name, artifact)
        for name, artifact in metadata.artifacts.items()
        if artifact.kind == ArtifactKind.EXECUTABLE
    ]

    # Checked up front so the outcome does not depend on variant order.
    for name, artifact in executables:
        for variant in artifact.variants:
            if variant.supported_triples is None:
                log.error("missing_supported_triples", artifact=name, path=variant.path)
                raise MissingMetadataField(
                    message=(
                        f'No "supportedTriples" found in the artifact metadata '
                        f"for {name} in {root}"
                    ),
                    artifact=name,
                    field="supportedTriples",
                    details={"bundle": str(root)},
                )

    result: list[ExecutableInfo] = []
    for name, artifact in executables:
        for variant in artifact.variants:
            matched = _matching_triples(variant, requested)
            if not matched:
                continue
            info = ExecutableInfo(
                name=name,
                executable_path=resolve_relative(variant.path, root),
                supported_triples=matched,
            )
            log.debug(
                "executable_variant_matched",
                artifact=name,
                executable_path=str(info.executable_path),
                matched=[str(t) for t in matched],
            )
            result.append(info)
    return result


# =============================================================================
# Libraries
# =============================================================================
def resolve_libraries(
    bundle_root: Union[Path, str],
    triple: Triple,
    file_system: Optional[FileSystem] = None,
    config: Optional[ResolverConfig] = None,
    loader: Optional[ArtifactsArchiveLoader] = None,
) -> list[LibraryInfo]:
    """Resolve at most one library variant per library artifact.

    Variants are scanned in declaration order and the first one declaring a
    version-equivalent triple is taken. A variant without supportedTriples
    never matches. Header paths and the module map come from the variant's
    own metadata; no headers fallback applies.

    Returns:
        One LibraryInfo per library artifact that has a matching variant.

    Raises:
        MetadataParseError: If the bundle's metadata cannot be loaded.
        PathError: If the bundle root or a selected variant's path is invalid.
        TripleParseError: If a triple cannot be normalized.
    """
    root, metadata = _load(bundle_root, file_system, config, loader)
    log = logger.bind(component="archive_resolver", bundle=str(root), triple=str(triple))
    requested = normalize(triple)

    result: list[LibraryInfo] = []
    for name, artifact in metadata.artifacts.items():
        if artifact.kind != ArtifactKind.LIBRARY:
            continue
        for variant in artifact.variants:
            if not _matching_triples(variant, requested):
                continue
            library_metadata = variant.library_metadata
            if library_metadata is not None:
                headers = tuple(resolve_relative(p, root) for p in library_metadata.header_paths)
                module_map = (
                    resolve_relative(library_metadata.module_map_path, root)
                    if library_metadata.module_map_path is not None
                    else None
                )
            else:
                headers, module_map = (), None

            info = LibraryInfo(
                library_path=resolve_relative(variant.path, root),
                headers_paths=headers,
                module_map_path=module_map,
            )
            log.debug("library_variant_selected", artifact=name, library_path=str(info.library_path))
            result.append(info)
            break
    return result
