"""Unit tests for configuration module."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from wildgrep.core.config import SearchConfig
from wildgrep.core.constants import DEFAULT_TIMEOUT_MS, MAX_WORKER_THREADS
from wildgrep.core.exceptions import ConfigurationError
from wildgrep.pattern import CompiledPattern


class TestSearchConfig:
    """Test SearchConfig model."""

    def test_default_values(self):
        """Test default values."""
        config = SearchConfig(needle="TODO")
        assert config.root == "."
        assert config.file_pattern == "*"
        assert config.timeout_ms == DEFAULT_TIMEOUT_MS
        assert config.max_workers == MAX_WORKER_THREADS
        assert config.ignores == []
        assert config.include_hidden is True

    def test_empty_needle_raises_error(self):
        """Test that an empty needle raises ValidationError."""
        with pytest.raises(ValidationError):
            SearchConfig(needle="")

    def test_invalid_file_pattern_raises_error(self):
        """Test that a glob with '**' is rejected at construction."""
        with pytest.raises(ValidationError) as exc_info:
            SearchConfig(needle="x", file_pattern="a**b")
        assert "* or ? may not follow *" in str(exc_info.value)

    def test_invalid_file_pattern_on_assignment(self):
        """Test assignment is validated too."""
        config = SearchConfig(needle="x")
        with pytest.raises(ValidationError):
            config.file_pattern = "*?"

    def test_timeout_must_be_positive(self):
        """Test timeout validation."""
        with pytest.raises(ValidationError):
            SearchConfig(needle="x", timeout_ms=0)

    def test_max_workers_range(self):
        """Test max_workers validation."""
        assert SearchConfig(needle="x", max_workers=4).max_workers == 4
        with pytest.raises(ValidationError):
            SearchConfig(needle="x", max_workers=0)
        with pytest.raises(ValidationError):
            SearchConfig(needle="x", max_workers=1000)

    def test_ignores_are_trimmed_and_validated(self):
        """Test blank ignore entries are dropped and bad globs rejected."""
        config = SearchConfig(needle="x", ignores=[" node_modules ", "", "*.min.js"])
        assert config.ignores == ["node_modules", "*.min.js"]

        with pytest.raises(ValidationError):
            SearchConfig(needle="x", ignores=["a**"])

    def test_derived_properties(self):
        """Test computed properties."""
        config = SearchConfig(needle="x", file_pattern="*.go", timeout_ms=1500, root="src")
        assert isinstance(config.compiled_file_pattern, CompiledPattern)
        assert config.compiled_file_pattern.matches("main.go") is True
        assert config.compiled_file_pattern is config.compiled_file_pattern
        assert config.timeout_seconds == 1.5
        assert config.root_path == Path("src")
        assert config.max_file_size_bytes == int(config.max_file_size_mb * 1024 * 1024)

    def test_from_dict_wraps_errors(self):
        """Test from_dict raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            SearchConfig.from_dict({"needle": "x", "file_pattern": "**"})
        assert exc_info.value.message == "Invalid configuration"


class TestYamlLoading:
    """Test loading and saving YAML files."""

    def test_from_yaml(self, tmp_path):
        """Test loading a valid file."""
        config_file = tmp_path / "wildgrep.yaml"
        config_file.write_text(
            yaml.dump({"needle": "TODO", "file_pattern": "*.py", "timeout_ms": 500})
        )

        config = SearchConfig.from_yaml(config_file)
        assert config.needle == "TODO"
        assert config.file_pattern == "*.py"
        assert config.timeout_ms == 500

    def test_from_yaml_with_overrides(self, tmp_path):
        """Test overrides replace file values."""
        config_file = tmp_path / "wildgrep.yaml"
        config_file.write_text(yaml.dump({"needle": "TODO", "timeout_ms": 500}))

        config = SearchConfig.from_yaml(config_file, {"timeout_ms": 100, "needle": "FIXME"})
        assert config.timeout_ms == 100
        assert config.needle == "FIXME"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            SearchConfig.from_yaml(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        """Test an empty file raises ConfigurationError."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        with pytest.raises(ConfigurationError):
            SearchConfig.from_yaml(config_file)

    def test_invalid_yaml(self, tmp_path):
        """Test a syntax error raises ConfigurationError."""
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("needle: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            SearchConfig.from_yaml(config_file)
        assert "YAML" in exc_info.value.message

    def test_non_mapping_yaml(self, tmp_path):
        """Test a list at the top level is rejected."""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            SearchConfig.from_yaml(config_file)

    def test_invalid_values(self, tmp_path):
        """Test invalid values raise ConfigurationError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text(yaml.dump({"needle": "x", "file_pattern": "a*?b"}))
        with pytest.raises(ConfigurationError):
            SearchConfig.from_yaml(config_file)

    def test_to_yaml_round_trip(self, tmp_path):
        """Test saving and loading gives the same configuration."""
        config = SearchConfig(needle="x", file_pattern="\\*.txt", ignores=[".git"])
        output = tmp_path / "saved.yaml"
        config.to_yaml(output)

        assert SearchConfig.from_yaml(output) == config
