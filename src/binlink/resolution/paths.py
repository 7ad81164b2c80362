"""
binlink.resolution.paths - Declared Path Validation
=====================================================

Paths inside bundle metadata are relative to a base directory (the bundle
root or a slice subdirectory). A declared path is accepted only if it is:

    - non-empty and free of NUL bytes
    - relative (no leading "/") and not home-relative (no leading "~")
    - still inside the base directory once "." and ".." are collapsed

Anything else raises PathError.
"""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Union

from binlink.core.exceptions import PathError


def require_absolute(root: Union[Path, str]) -> Path:
    """Return `root` as a normalized absolute path.

    Raises:
        PathError: If `root` is not absolute.
    """
    if not str(root) or not posixpath.isabs(str(root)):
        raise PathError(
            message=f"Bundle root must be an absolute path: '{root}'",
            path=str(root),
            error_code="BUNDLE_ROOT_NOT_ABSOLUTE",
        )
    return Path(posixpath.normpath(str(root)))


def resolve_relative(path: str, base: Path) -> Path:
    """Resolve a declared relative path against `base`.

    Args:
        path: Path exactly as declared in the metadata.
        base: Absolute, normalized base directory.

    Returns:
        The absolute, normalized path.

    Raises:
        PathError: If `path` fails validation.
    """
    if not path or "\x00" in path:
        raise PathError(
            message=f"Declared path is empty or contains a NUL byte: {path!r}",
            path=path,
            base=str(base),
        )
    if path.startswith(("/", "~")):
        raise PathError(
            message=f"Declared path must be relative: '{path}'",
            path=path,
            base=str(base),
        )

    resolved = Path(posixpath.normpath(posixpath.join(str(base), path)))
    if resolved != base and base not in resolved.parents:
        raise PathError(
            message=f"Declared path '{path}' escapes its base directory",
            path=path,
            base=str(base),
            error_code="PATH_ESCAPES_BASE",
        )
    return resolved
