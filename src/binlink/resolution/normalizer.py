"""
binlink.resolution.normalizer - Version-Insensitive Triple Comparison
======================================================================

Bundles declare the triples they support with whatever OS version they were
built against, e.g. "arm64-apple-macosx11.0", while the build asks for the
host's version, e.g. "arm64-apple-macosx12.0". Both sides are normalized by
dropping the OS version before they are compared.

Only Darwin-family triples carry a platform version; all other triples
normalize to themselves.
"""

from __future__ import annotations

from binlink.core.triple import Triple


def normalize(triple: Triple) -> Triple:
    """Strip the OS version from a Darwin-family triple.

    Raises:
        TripleParseError: If the version-stripped text fails to re-parse.
    """
    return triple.without_version()


def is_version_equivalent(a: Triple, b: Triple) -> bool:
    """True when `a` and `b` are identical after version stripping."""
    return normalize(a) == normalize(b)
