"""
binlink.infrastructure.filesystem - Read-Only File System Capability
======================================================================

Resolvers never open files themselves. They read bundle metadata through a
FileSystem object handed in by the caller, which keeps resolution testable
without touching disk and lets a build tool route reads through its own
virtual file system.

Implementations:
    - LocalFileSystem:    Reads from the real disk
    - InMemoryFileSystem: Dict-backed, for tests and for tools that stage
                          bundles in memory

Usage:
    >>> fs = InMemoryFileSystem()
    >>> fs.write_file("/b/Foo.xcframework/Info.plist", plist_bytes)
    >>> fs.read_bytes(Path("/b/Foo.xcframework/Info.plist"))
"""

from __future__ import annotations

import posixpath
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import structlog


logger = structlog.get_logger()


# =============================================================================
# Abstract Base Class
# =============================================================================
class FileSystem(ABC):
    """Abstract read-only file system.

    Implementations must tolerate concurrent reads if resolvers are called
    from several threads against the same bundle.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True if a file exists at `path`."""
        ...

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Read the whole file at `path`.

        Raises:
            FileNotFoundError: If no file exists at `path`.
            OSError: If the file exists but cannot be read.
        """
        ...


# =============================================================================
# Local Disk Implementation
# =============================================================================
class LocalFileSystem(FileSystem):
    """FileSystem backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()


# =============================================================================
# In-Memory Implementation
# =============================================================================
class InMemoryFileSystem(FileSystem):
    """Dict-backed FileSystem for tests and in-memory staging.

    Paths are normalized to absolute POSIX form on write and on read, so
    "/a/b/../c" and "/a/c" address the same file.

    Example:
        >>> fs = InMemoryFileSystem({"/bundle/info.json": b"{}"})
        >>> fs.exists(Path("/bundle/info.json"))
        True
    """

    def __init__(self, files: Optional[dict[str, Union[bytes, str]]] = None) -> None:
        self._files: dict[str, bytes] = {}
        self._logger = logger.bind(component="in_memory_file_system")
        for path, content in (files or {}).items():
            self.write_file(path, content)

    @staticmethod
    def _key(path: Union[Path, str]) -> str:
        return posixpath.normpath(posixpath.join("/", str(path)))

    def write_file(self, path: Union[Path, str], content: Union[bytes, str]) -> None:
        """Store `content` at `path`, replacing any existing file."""
        data = content.encode("utf-8") if isinstance(content, str) else content
        self._files[self._key(path)] = data
        self._logger.debug("file_written", path=self._key(path), size=len(data))

    def remove_file(self, path: Union[Path, str]) -> bool:
        """Delete the file at `path`. Returns False if it did not exist."""
        return self._files.pop(self._key(path), None) is not None

    def exists(self, path: Path) -> bool:
        return self._key(path) in self._files

    def read_bytes(self, path: Path) -> bytes:
        try:
            return self._files[self._key(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None
