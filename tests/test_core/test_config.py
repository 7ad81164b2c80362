"""
Tests for binlink.core.config
===============================

These tests verify that the configuration system works correctly:
    - Default values are sensible and complete
    - Environment variables override defaults (including nested values)
    - YAML files are parsed correctly
    - Invalid YAML and invalid values raise ConfigurationError
"""

import pytest
import yaml

from binlink.core.config import (
    MetadataConfig,
    ResolverConfig,
    get_default_config,
    load_config,
)
from binlink.core.exceptions import ConfigurationError


# =============================================================================
# Test: Default Configuration
# =============================================================================
class TestDefaultConfig:
    """Tests for default configuration values."""

    def test_default_config_creates_successfully(self) -> None:
        config = ResolverConfig()
        assert config.log_level == "INFO"

    def test_default_metadata_file_names(self) -> None:
        config = ResolverConfig()
        assert config.metadata.xcframework_info_file == "Info.plist"
        assert config.metadata.artifacts_archive_info_file == "info.json"

    def test_default_schema_versions(self) -> None:
        assert MetadataConfig().supported_schema_versions == ["1.0", "1.1", "1.2"]

    def test_get_default_config(self) -> None:
        assert isinstance(get_default_config(), ResolverConfig)


# =============================================================================
# Test: Environment Variables
# =============================================================================
class TestEnvironmentOverrides:
    """Tests for BINLINK_* environment variable loading."""

    def test_top_level_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BINLINK_LOG_LEVEL", "DEBUG")
        assert ResolverConfig().log_level == "DEBUG"

    def test_nested_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BINLINK_METADATA__XCFRAMEWORK_INFO_FILE", "Manifest.plist")
        assert ResolverConfig().metadata.xcframework_info_file == "Manifest.plist"

    def test_constructor_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BINLINK_LOG_LEVEL", "DEBUG")
        assert ResolverConfig(log_level="ERROR").log_level == "ERROR"


# =============================================================================
# Test: YAML Loading
# =============================================================================
class TestLoadConfig:
    """Tests for load_config()."""

    def test_loads_yaml_file(self, tmp_path) -> None:
        path = tmp_path / "binlink.yaml"
        path.write_text(yaml.safe_dump({"metadata": {"supported_schema_versions": ["1.0"]}}))
        config = load_config(str(path))
        assert config.log_level == "INFO"
        assert config.metadata.supported_schema_versions == ["1.0"]
        assert config.metadata.artifacts_archive_info_file == "info.json"

    def test_missing_explicit_file_raises(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_auto_detects_binlink_yaml(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "binlink.yaml").write_text("log_level: WARNING\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().log_level == "WARNING"

    def test_defaults_without_any_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_config().log_level == "INFO"

    def test_empty_file_uses_defaults(self, tmp_path) -> None:
        path = tmp_path / "binlink.yaml"
        path.write_text("")
        assert load_config(str(path)).log_level == "INFO"

    def test_malformed_yaml_raises(self, tmp_path) -> None:
        path = tmp_path / "binlink.yaml"
        path.write_text("metadata: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))
        assert exc_info.value.error_code == "CONFIG_YAML_INVALID"

    def test_non_mapping_yaml_raises(self, tmp_path) -> None:
        path = tmp_path / "binlink.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_invalid_value_raises(self, tmp_path) -> None:
        path = tmp_path / "binlink.yaml"
        path.write_text("metadata:\n  supported_schema_versions: []\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))
        assert exc_info.value.error_code == "CONFIG_ERROR"
        assert exc_info.value.details["errors"]
