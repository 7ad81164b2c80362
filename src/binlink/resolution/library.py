"""
binlink.resolution.library - Library Bundle Resolution
========================================================

Picks the one slice of an .xcframework that applies to a requested triple.

Matching Rules (first slice in declaration order wins):
    (a) slice.platform == xcframework_platform(triple.os)
    (b) slice.variant  == xcframework_variant(triple.environment)
        (a slice without a variant only matches a triple without one)
    (c) triple.arch in slice.architectures

A bundle guarantees at most one slice fits a triple, so resolution returns
at most one LibraryInfo. No match is an empty result, not an error.

Path Layout:
    Foo.xcframework/
    ├── Info.plist
    └── ios-arm64_x86_64-simulator/      ← slice directory (LibraryIdentifier)
        ├── libFoo.a                     ← LibraryPath
        └── Headers/                     ← HeadersPath (optional)

    Library and headers paths resolve against the slice directory. Without
    a HeadersPath the slice directory itself is the single headers
    directory. Library bundles never declare a module map.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import structlog

from binlink.core.config import ResolverConfig, get_default_config
from binlink.core.models import LibraryInfo, LibrarySlice
from binlink.core.triple import Triple
from binlink.infrastructure.filesystem import FileSystem, LocalFileSystem
from binlink.infrastructure.metadata import XCFrameworkLoader, load_xcframework_metadata
from binlink.resolution.normalizer import normalize
from binlink.resolution.paths import require_absolute, resolve_relative
from binlink.resolution.platforms import xcframework_platform, xcframework_variant


logger = structlog.get_logger()


def _matches(
    library: LibrarySlice,
    platform: Optional[str],
    variant: Optional[str],
    arch: str,
) -> bool:
    return (
        library.platform == platform
        and library.variant == variant
        and arch in library.architectures
    )


def resolve_library(
    bundle_root: Union[Path, str],
    triple: Triple,
    file_system: Optional[FileSystem] = None,
    config: Optional[ResolverConfig] = None,
    loader: Optional[XCFrameworkLoader] = None,
) -> Optional[LibraryInfo]:
    """Resolve the library slice of a library bundle for `triple`.

    Args:
        bundle_root: Absolute path of the .xcframework directory.
        triple: The triple currently being built.
        file_system: Where to read metadata from. Defaults to local disk.
        config: Resolver configuration. Defaults to get_default_config().
        loader: Metadata loader. Defaults to load_xcframework_metadata.

    Returns:
        The LibraryInfo of the first matching slice, or None.

    Raises:
        MetadataParseError: If the bundle's metadata cannot be loaded.
        PathError: If the bundle root or a declared path fails validation.
        TripleParseError: If `triple` cannot be normalized.
    """
    root = require_absolute(bundle_root)
    file_system = file_system or LocalFileSystem()
    config = config or get_default_config()
    loader = loader or load_xcframework_metadata
    log = logger.bind(component="library_resolver", bundle=str(root), triple=str(triple))

    metadata = loader(file_system, root, config)

    requested = normalize(triple)
    # None for triples a library bundle cannot describe; never equals a slice.
    platform = xcframework_platform(requested.os)
    variant = xcframework_variant(requested.environment)
    library = next(
        (lib for lib in metadata.libraries if _matches(lib, platform, variant, requested.arch)),
        None,
    )
    if library is None:
        log.debug("no_matching_library_slice", slices=len(metadata.libraries))
        return None

    library_dir = resolve_relative(library.library_identifier, root)
    library_file = resolve_relative(library.library_path, library_dir)
    if library.headers_path is not None:
        headers_dirs = (resolve_relative(library.headers_path, library_dir),)
    else:
        headers_dirs = (library_dir,)

    log.debug(
        "library_slice_selected",
        library_identifier=library.library_identifier,
        library_path=str(library_file),
    )
    return LibraryInfo(
        library_path=library_file,
        headers_paths=headers_dirs,
        module_map_path=None,
    )
