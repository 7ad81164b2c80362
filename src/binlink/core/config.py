"""
binlink.core.config - Configuration Management
================================================

This module provides the configuration system for binlink. Configuration
can be loaded from multiple sources with the following priority (highest first):

    1. Explicit constructor arguments
    2. Environment variables (prefixed with BINLINK_)
    3. YAML configuration file (binlink.yaml)
    4. Default values defined in the models below

Architecture Context:
    The resolvers take an optional ResolverConfig and fall back to
    get_default_config() when none is given:

        ResolverConfig
            ├── MetadataConfig   → metadata loaders (file names, schema versions)
            └── (other settings) → host application (log level)

Usage:
    # Load from environment variables:
    config = ResolverConfig()

    # Load from YAML file:
    config = load_config("binlink.yaml")

    # Explicit overrides:
    config = ResolverConfig(log_level="DEBUG")

Environment Variables:
    BINLINK_LOG_LEVEL=DEBUG
    BINLINK_METADATA__XCFRAMEWORK_INFO_FILE=Info.plist
    BINLINK_METADATA__ARTIFACTS_ARCHIVE_INFO_FILE=info.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from binlink.core.exceptions import ConfigurationError


# =============================================================================
# Metadata Configuration
# =============================================================================
# Where the metadata loaders look inside a bundle, and which artifact archive
# schema versions they accept.
# =============================================================================
class MetadataConfig(BaseModel):
    """Configuration for bundle metadata loading.

    Attributes:
        xcframework_info_file: Metadata file name at the root of a library
            bundle.
        artifacts_archive_info_file: Metadata file name at the root of an
            artifact archive.
        supported_schema_versions: Accepted values of info.json's
            "schemaVersion". Anything else is a MetadataParseError.
    """

    xcframework_info_file: str = Field(
        default="Info.plist",
        min_length=1,
        description="Library bundle metadata file name",
    )
    artifacts_archive_info_file: str = Field(
        default="info.json",
        min_length=1,
        description="Artifact archive metadata file name",
    )
    supported_schema_versions: list[str] = Field(
        default_factory=lambda: ["1.0", "1.1", "1.2"],
        min_length=1,
        description="Accepted artifact archive schema versions",
    )


# =============================================================================
# Main Configuration
# =============================================================================
# Environment Variable Mapping:
#   BINLINK_LOG_LEVEL                     → config.log_level
#   BINLINK_METADATA__XCFRAMEWORK_INFO_FILE → config.metadata.xcframework_info_file
# =============================================================================
class ResolverConfig(BaseSettings):
    """Top-level configuration for binlink.

    The configuration cascade (highest priority first):
        1. Constructor arguments: ResolverConfig(log_level="DEBUG")
        2. Environment variables: BINLINK_LOG_LEVEL=DEBUG
        3. YAML file: load_config("binlink.yaml")
        4. Default values defined below

    Attributes:
        log_level: Logging level the host should apply. binlink itself only
            emits structlog events and never configures logging.
        metadata: Metadata loading configuration (see MetadataConfig).
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    metadata: MetadataConfig = Field(
        default_factory=MetadataConfig,
        description="Metadata loading configuration",
    )

    model_config = {
        "env_prefix": "BINLINK_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
    }


# =============================================================================
# Configuration Loader
# =============================================================================
def load_config(path: Optional[str] = None) -> ResolverConfig:
    """Load binlink configuration from a YAML file and/or environment variables.

    Args:
        path: Path to a YAML configuration file. If None, looks for
            'binlink.yaml' in the current directory. If that doesn't exist
            either, uses pure defaults + environment variables.

    Returns:
        A fully validated ResolverConfig instance.

    Raises:
        ConfigurationError: If the YAML file exists but is invalid.
        FileNotFoundError: If an explicit path is provided but doesn't exist.
    """
    if path is None:
        default_path = Path("binlink.yaml")
        if default_path.exists():
            path = str(default_path)

    yaml_data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(config_path) as f:
            try:
                raw_data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    message=f"Malformed YAML in {path}: {e}",
                    error_code="CONFIG_YAML_INVALID",
                    details={"path": path},
                ) from e

        if isinstance(raw_data, dict):
            yaml_data = raw_data
        elif raw_data is not None:
            raise ConfigurationError(
                message=f"Top level of {path} must be a mapping",
                error_code="CONFIG_YAML_INVALID",
                details={"path": path, "found": type(raw_data).__name__},
            )

    try:
        return ResolverConfig(**yaml_data)
    except ValidationError as e:
        raise ConfigurationError(
            message=f"Invalid configuration: {e.error_count()} error(s)",
            details={"path": path, "errors": e.errors(include_url=False)},
        ) from e


def get_default_config() -> ResolverConfig:
    """Create a ResolverConfig with all defaults (plus any set env vars)."""
    return ResolverConfig()
