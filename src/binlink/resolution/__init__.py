"""
binlink.resolution - Matching Layer
=====================================

Turns typed bundle metadata plus a requested triple into link/run
descriptors. The two bundle schemas have independent entry points that
share only triple normalization and path validation:

    normalizer   normalize(), is_version_equivalent()
    platforms    xcframework_platform(), xcframework_variant()
    paths        require_absolute(), resolve_relative()
    library      resolve_library()                       (.xcframework)
    archive      resolve_executables(), resolve_libraries() (.artifactbundle)
"""

from binlink.resolution.archive import resolve_executables, resolve_libraries
from binlink.resolution.library import resolve_library
from binlink.resolution.normalizer import is_version_equivalent, normalize
from binlink.resolution.paths import require_absolute, resolve_relative
from binlink.resolution.platforms import xcframework_platform, xcframework_variant

__all__ = [
    "normalize",
    "is_version_equivalent",
    "xcframework_platform",
    "xcframework_variant",
    "require_absolute",
    "resolve_relative",
    "resolve_library",
    "resolve_executables",
    "resolve_libraries",
]
