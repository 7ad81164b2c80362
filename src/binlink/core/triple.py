"""
binlink.core.triple - Target Triple Value Object
==================================================

A target triple names the platform a build produces code for. binlink reads
the LLVM textual form:

    arch-vendor-os[version][-environment]

    arm64-apple-macosx12.0            arch=arm64   os=macosx  version=12.0
    arm64-apple-ios14.0-simulator     arch=arm64   os=ios     env=simulator
    x86_64-unknown-linux-gnu          arch=x86_64  os=linux   env=gnu
    aarch64-linux-android             (vendor omitted; becomes "unknown")

Darwin-family triples carry a platform version in their OS component. Two
triples that differ only in that version are "version-equivalent";
`Triple.without_version()` is the building block for that comparison.

Triples are frozen Pydantic models, so they hash, compare by component, and
can be used directly as field types in metadata models: a plain string in a
`supportedTriples` list is parsed on validation.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from binlink.core.enums import OperatingSystem
from binlink.core.exceptions import TripleParseError


_KNOWN_OS_NAMES = sorted((os.value for os in OperatingSystem), key=len, reverse=True)
_VERSION_PATTERN = re.compile(r"\d+(\.\d+)*")
_OS_NAME_PATTERN = re.compile(r"([^\d]+)(.*)")


def _split_os(component: str, text: str) -> tuple[str, str]:
    """Split an OS component such as "macosx12.0" into name and version."""
    for name in _KNOWN_OS_NAMES:
        if component.startswith(name):
            version = component[len(name):]
            break
    else:
        match = _OS_NAME_PATTERN.fullmatch(component)
        if match is None:
            raise TripleParseError(
                message=f"OS component '{component}' has no name",
                triple=text,
            )
        name, version = match.groups()

    if version and _VERSION_PATTERN.fullmatch(version) is None:
        raise TripleParseError(
            message=f"OS component '{component}' has a malformed version '{version}'",
            triple=text,
        )
    return name, version


def _is_known_os(component: str) -> bool:
    return any(component.startswith(name) for name in _KNOWN_OS_NAMES)


def _components(text: Any) -> dict[str, Any]:
    if not isinstance(text, str) or not text:
        raise TripleParseError(
            message="Triple must be a non-empty string",
            triple=str(text),
        )

    parts = text.split("-")
    if len(parts) < 2 or any(not part for part in parts):
        raise TripleParseError(
            message=f"'{text}' is not of the form arch-vendor-os[-environment]",
            triple=text,
        )

    arch = parts[0]
    if len(parts) == 2 or (len(parts) == 3 and _is_known_os(parts[1])):
        # arch-os[-environment]; four or more components always carry a vendor
        vendor = "unknown"
        os_component, rest = parts[1], parts[2:]
    else:
        vendor = parts[1]
        os_component, rest = parts[2], parts[3:]

    os_name, os_version = _split_os(os_component, text)
    return {
        "arch": arch,
        "vendor": vendor,
        "os": os_name,
        "os_version": os_version,
        "environment": "-".join(rest) if rest else None,
    }


# =============================================================================
# Triple Model
# =============================================================================
class Triple(BaseModel):
    """An immutable, parsed target triple.

    Attributes:
        arch: Architecture name exactly as written (e.g. "arm64", "x86_64").
        vendor: Vendor component, "unknown" when the text omitted it.
        os: OS name without version (e.g. "macosx", "linux").
        os_version: Platform version suffix of the OS component, "" if none.
        environment: Environment/variant component (e.g. "simulator").

    Example:
        >>> t = Triple.parse("arm64-apple-macosx12.0")
        >>> t.os, t.os_version
        ('macosx', '12.0')
        >>> t.without_version().triple_string
        'arm64-apple-macosx'
    """

    model_config = ConfigDict(frozen=True)

    arch: str = Field(description="Architecture name, e.g. arm64")
    vendor: str = Field(default="unknown", description="Vendor, e.g. apple")
    os: str = Field(description="OS name without its version")
    os_version: str = Field(default="", description="OS platform version")
    environment: Optional[str] = Field(
        default=None,
        description="Environment or platform variant, e.g. simulator",
    )

    @model_validator(mode="before")
    @classmethod
    def _parse_text(cls, data: Any) -> Any:
        # Lets metadata models declare `list[Triple]` and validate raw strings.
        if isinstance(data, str):
            try:
                return _components(data)
            except TripleParseError as e:
                raise ValueError(e.message) from e
        return data

    @classmethod
    def parse(cls, text: str) -> Triple:
        """Parse triple text.

        Raises:
            TripleParseError: If the text is not a well-formed triple.
        """
        return cls(**_components(text))

    @property
    def triple_string(self) -> str:
        """Canonical text form, re-derived from the components."""
        text = f"{self.arch}-{self.vendor}-{self.os}{self.os_version}"
        if self.environment:
            text = f"{text}-{self.environment}"
        return text

    @property
    def is_darwin(self) -> bool:
        """True for Darwin-family OSes, whose triples carry a platform version."""
        return self.os in OperatingSystem.darwin_family()

    def without_version(self) -> Triple:
        """Return this triple with its OS platform version removed.

        Darwin-family triples are rebuilt from text with an empty version and
        re-parsed; every other triple is returned unchanged.

        Raises:
            TripleParseError: If the rebuilt text does not parse.
        """
        if not self.is_darwin:
            return self
        return Triple.parse(self.model_copy(update={"os_version": ""}).triple_string)

    def __str__(self) -> str:
        return self.triple_string
