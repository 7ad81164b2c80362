"""
binlink - Prebuilt Binary Artifact Resolution
==============================================

binlink answers one question for a build system's link step: given a binary
target's on-disk bundle and the triple being built, which prebuilt binary
applies, and where are its headers and module map?

Two bundle formats are supported:

    .xcframework     library bundle; one slice per platform/variant/arch
    .artifactbundle  artifact archive; executables and libraries, each with
                     variants scoped to a list of supported triples

Quick Start:
    >>> from binlink import BinaryTarget
    >>> target = BinaryTarget("Foo", "/deps/Foo.xcframework")
    >>> target.resolve_library("arm64-apple-ios14.0-simulator")
    [LibraryInfo(library_path=PosixPath('/deps/Foo.xcframework/ios-.../libFoo.a'), ...)]

Layers:
    core/            Triple, metadata/output models, config, exceptions
    infrastructure/  FileSystem capability and metadata loaders
    resolution/      Matching algorithms
    facade           BinaryTarget
"""

# =============================================================================
# Package Version
# =============================================================================
__version__ = "0.1.0"

from binlink.facade import BinaryTarget

__all__ = ["BinaryTarget", "__version__"]
