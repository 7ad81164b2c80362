"""
binlink.core.exceptions - Custom Exception Hierarchy
======================================================

This module defines a structured exception hierarchy for binlink.
Every failure a resolver can produce is one of these types, and each one
carries contextual information beyond a plain message string.

Exception Hierarchy:
    BinlinkError (base)
        ├── ConfigurationError     - Invalid config, unreadable config file
        ├── TripleParseError       - Malformed target triple text
        ├── MetadataParseError     - Bundle metadata missing or malformed
        ├── PathError              - A declared path fails validation
        └── MissingMetadataField   - A required metadata field is absent

Error Handling Contract:
    All errors are non-retryable. They surface to the caller as a build
    failure. "No applicable slice or variant" is NOT an error: resolvers
    return an empty list in that case, and callers must keep the two apart.

        resolve_library(...)  → []            "not supported on this triple"
        resolve_library(...)  → raises       "bundle is malformed"

Usage:
    >>> from binlink.core.exceptions import PathError
    >>> raise PathError(
    ...     message="Declared path escapes its base directory",
    ...     path="../../etc/passwd",
    ...     base="/bundles/Foo.xcframework/ios-arm64",
    ... )
"""

from __future__ import annotations

from typing import Any, Optional


# =============================================================================
# Base Exception
# =============================================================================
# All binlink exceptions inherit from this base class, so a build step can
# catch every resolution failure with a single except clause:
#
#   try:
#       libraries = target.libraries(triple)
#   except BinlinkError as e:
#       logger.error(e.message, error_code=e.error_code, details=e.details)
# =============================================================================
class BinlinkError(Exception):
    """Base exception for all binlink errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code for programmatic handling.
            Convention: UPPER_SNAKE_CASE (e.g., "INVALID_PATH").
        details: Arbitrary dict with additional debugging context, such as
            the bundle path or the offending metadata value.

    Example:
        >>> try:
        ...     resolve_executables(root, triple)
        ... except BinlinkError as e:
        ...     print(f"[{e.error_code}] {e.message}")
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        # Call Exception.__init__ with the message so that str(exception) works
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize this exception to a dictionary.

        Useful for structured logging and for build-tool error reports.

        Returns:
            Dictionary with error_type, message, error_code, and details.
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


# =============================================================================
# Configuration Error
# =============================================================================
# Raised while loading configuration. Bad config should fail fast.
# =============================================================================
class ConfigurationError(BinlinkError):
    """Raised when binlink configuration is invalid or unreadable.

    Common Causes:
        - Malformed YAML in binlink.yaml
        - A YAML document whose top level is not a mapping
        - Values rejected by the config model (e.g., unknown environment)
    """

    def __init__(
        self,
        message: str,
        error_code: str = "CONFIG_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


# =============================================================================
# Triple Parse Error
# =============================================================================
# Raised when text cannot be read as a target triple, including when a
# version-stripped triple fails to re-parse.
# =============================================================================
class TripleParseError(BinlinkError):
    """Raised when a target triple string is malformed.

    Attributes:
        triple: The offending triple text.

    Example:
        >>> raise TripleParseError(
        ...     message="Triple has an empty component",
        ...     triple="arm64--macosx",
        ... )
    """

    def __init__(
        self,
        message: str,
        triple: str,
        error_code: str = "TRIPLE_PARSE_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        enriched_details = details or {}
        enriched_details["triple"] = triple

        super().__init__(message=message, error_code=error_code, details=enriched_details)

        self.triple = triple


# =============================================================================
# Metadata Parse Error
# =============================================================================
# Raised when a bundle's metadata file is missing, cannot be decoded, or does
# not match its schema.
# =============================================================================
class MetadataParseError(BinlinkError):
    """Raised when bundle metadata cannot be loaded.

    Common Causes:
        - Info.plist / info.json missing from the bundle root
        - Undecodable property list or JSON
        - Schema mismatch (missing keys, wrong types, unsupported version)
        - A supportedTriples entry that is not a valid triple

    Attributes:
        metadata_path: Path of the metadata file that failed to load.
    """

    def __init__(
        self,
        message: str,
        metadata_path: str,
        error_code: str = "METADATA_PARSE_ERROR",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        enriched_details = details or {}
        enriched_details["metadata_path"] = metadata_path

        super().__init__(message=message, error_code=error_code, details=enriched_details)

        self.metadata_path = metadata_path


# =============================================================================
# Path Error
# =============================================================================
# Raised when a path declared in metadata cannot be resolved against its base
# directory, or when a bundle root is not absolute.
# =============================================================================
class PathError(BinlinkError):
    """Raised when a declared path fails to validate.

    Attributes:
        path: The declared path as written in the metadata.
        base: The directory it was resolved against, if any.
    """

    def __init__(
        self,
        message: str,
        path: str,
        base: Optional[str] = None,
        error_code: str = "INVALID_PATH",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        enriched_details = details or {}
        enriched_details["path"] = path
        if base is not None:
            enriched_details["base"] = base

        super().__init__(message=message, error_code=error_code, details=enriched_details)

        self.path = path
        self.base = base


# =============================================================================
# Missing Metadata Field
# =============================================================================
# Raised by the executables operation when a variant omits its
# supportedTriples declaration. Fails the whole call.
# =============================================================================
class MissingMetadataField(BinlinkError):
    """Raised when metadata omits a field the operation requires.

    Attributes:
        artifact: Name of the artifact whose variant is incomplete.
        field: Name of the missing metadata key.

    Example:
        >>> raise MissingMetadataField(
        ...     message='No "supportedTriples" found for tool',
        ...     artifact="tool",
        ...     field="supportedTriples",
        ... )
    """

    def __init__(
        self,
        message: str,
        artifact: str,
        field: str,
        error_code: str = "MISSING_METADATA_FIELD",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        enriched_details = details or {}
        enriched_details["artifact"] = artifact
        enriched_details["field"] = field

        super().__init__(message=message, error_code=error_code, details=enriched_details)

        self.artifact = artifact
        self.field = field
