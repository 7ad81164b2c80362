"""
binlink.infrastructure - I/O Layer
====================================

Everything that touches bytes lives here; the resolution layer only sees
typed models.

    ┌─────────────── RESOLUTION LAYER ────────────────────┐
    │  resolve_library, resolve_executables, ...           │
    └─────────────────────┬───────────────────────────────┘
                          │ typed metadata
                          ▼
    ┌─────────────── INFRASTRUCTURE LAYER ────────────────┐
    │  Metadata loaders (Info.plist, info.json)            │
    │  FileSystem (ABC)                                    │
    │    ├── LocalFileSystem                               │
    │    └── InMemoryFileSystem                            │
    └──────────────────────────────────────────────────────┘
"""

from binlink.infrastructure.filesystem import (
    FileSystem,
    InMemoryFileSystem,
    LocalFileSystem,
)
from binlink.infrastructure.metadata import (
    ArtifactsArchiveLoader,
    XCFrameworkLoader,
    load_artifacts_archive_metadata,
    load_xcframework_metadata,
)

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "InMemoryFileSystem",
    "XCFrameworkLoader",
    "ArtifactsArchiveLoader",
    "load_xcframework_metadata",
    "load_artifacts_archive_metadata",
]
