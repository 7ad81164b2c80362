"""
binlink.facade - Binary Target Facade
=======================================

BinaryTarget is the object a build system holds for each binary dependency.
It knows where the bundle lives and what schema it uses, and forwards each
request to the matching resolver.

    ┌──────────────────────────────────────────────────┐
    │               BinaryTarget (Facade)               │
    │                                                   │
    │   resolve_library ─────────→ resolution.library   │
    │   resolve_executables ──┐                         │
    │   resolve_libraries ────┴──→ resolution.archive   │
    │   libraries ── dispatch on kind ──┘               │
    └───────────────────────┬──────────────────────────┘
                            │ FileSystem, ResolverConfig
                            ▼
    ┌──────────────────────────────────────────────────┐
    │         Infrastructure (metadata loaders)         │
    └──────────────────────────────────────────────────┘

The facade holds no resolution state. Every call reloads metadata, so two
calls never share results; callers that want caching key it on
(artifact_path, triple) themselves.

Usage:
    >>> target = BinaryTarget("SwiftLint", "/deps/SwiftLint.artifactbundle")
    >>> target.kind
    <BinaryKind.ARTIFACTS_ARCHIVE: 'artifactsArchive'>
    >>> target.resolve_executables("arm64-apple-macosx14.0")
    [ExecutableInfo(name='swiftlint', ...)]
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Optional, Union

import structlog

from binlink.core.config import ResolverConfig, get_default_config
from binlink.core.enums import BinaryKind
from binlink.core.models import ExecutableInfo, LibraryInfo
from binlink.core.triple import Triple
from binlink.infrastructure.filesystem import FileSystem, LocalFileSystem
from binlink.resolution.archive import resolve_executables, resolve_libraries
from binlink.resolution.library import resolve_library
from binlink.resolution.paths import require_absolute


logger = structlog.get_logger()


class BinaryTarget:
    """A binary dependency backed by an on-disk bundle.

    Attributes:
        name: Target name, for logging.
        artifact_path: Absolute, normalized bundle path.
        kind: Bundle schema, derived from the bundle's extension.

    Args:
        name: Target name.
        artifact_path: Absolute path of the .xcframework or .artifactbundle.
        file_system: Read-only file system. Defaults to LocalFileSystem.
        config: Resolver configuration. Defaults to get_default_config().

    Raises:
        PathError: If `artifact_path` is not absolute.
    """

    def __init__(
        self,
        name: str,
        artifact_path: Union[Path, str],
        file_system: Optional[FileSystem] = None,
        config: Optional[ResolverConfig] = None,
    ) -> None:
        self.name = name
        self.artifact_path = require_absolute(artifact_path)
        self.kind = BinaryKind.for_file_extension(self.artifact_path.suffix)
        self._file_system = file_system or LocalFileSystem()
        self._config = config or get_default_config()
        self._logger = logger.bind(
            component="binary_target",
            target=name,
            kind=self.kind.value,
        )

    def __repr__(self) -> str:
        return (
            f"BinaryTarget(name={self.name!r}, "
            f"artifact_path={str(self.artifact_path)!r}, "
            f"kind={self.kind.value!r})"
        )

    @staticmethod
    def _triple(triple: Union[Triple, str]) -> Triple:
        return triple if isinstance(triple, Triple) else Triple.parse(triple)

    # -------------------------------------------------------------------------
    # Library bundle
    # -------------------------------------------------------------------------
    def resolve_library(self, triple: Union[Triple, str]) -> list[LibraryInfo]:
        """Library of the bundle's matching slice, as a list of zero or one."""
        library = resolve_library(
            self.artifact_path,
            self._triple(triple),
            file_system=self._file_system,
            config=self._config,
        )
        return [library] if library is not None else []

    # -------------------------------------------------------------------------
    # Artifact archive
    # -------------------------------------------------------------------------
    def resolve_executables(self, triple: Union[Triple, str]) -> list[ExecutableInfo]:
        """Executables of the archive that apply to `triple`."""
        return resolve_executables(
            self.artifact_path,
            self._triple(triple),
            file_system=self._file_system,
            config=self._config,
        )

    def parse_artifact_archives(self, triple: Union[Triple, str]) -> list[ExecutableInfo]:
        """Deprecated alias of resolve_executables."""
        warnings.warn(
            "parse_artifact_archives is deprecated; use resolve_executables",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.resolve_executables(triple)

    def resolve_libraries(self, triple: Union[Triple, str]) -> list[LibraryInfo]:
        """Libraries of the archive that apply to `triple`, one per artifact."""
        return resolve_libraries(
            self.artifact_path,
            self._triple(triple),
            file_system=self._file_system,
            config=self._config,
        )

    # -------------------------------------------------------------------------
    # Kind dispatch
    # -------------------------------------------------------------------------
    def libraries(self, triple: Union[Triple, str]) -> list[LibraryInfo]:
        """Libraries to link for `triple`, whichever schema the bundle uses.

        Bundles of unknown kind have nothing to link and yield an empty list.
        """
        if self.kind == BinaryKind.XCFRAMEWORK:
            return self.resolve_library(triple)
        if self.kind == BinaryKind.ARTIFACTS_ARCHIVE:
            return self.resolve_libraries(triple)
        self._logger.warning("unknown_binary_kind", artifact_path=str(self.artifact_path))
        return []
