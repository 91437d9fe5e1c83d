"""
Configuration management with Pydantic validation.

This module provides the strongly-typed search configuration and its
YAML loading and saving.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from wildgrep.core.constants import (
    DEFAULT_FILE_PATTERN,
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_ROOT,
    DEFAULT_TIMEOUT_MS,
    MAX_FILE_SIZE_MB,
    MAX_WORKER_THREADS,
    MAX_WORKER_THREADS_LIMIT,
)
from wildgrep.core.exceptions import ConfigurationError, PatternError
from wildgrep.pattern import CompiledPattern
from wildgrep.pattern.compiler import compile_cached


class SearchConfig(BaseModel):
    """
    Settings for one search run.

    Attributes:
        needle: Text searched for in file contents, byte for byte
        root: Directory the walk starts from
        file_pattern: Glob matched against each file's base name
        timeout_ms: Time budget for the whole search in milliseconds
        max_workers: Number of threads scanning file contents
        ignores: Globs matched against path component names to skip
        include_hidden: Whether dot-files and dot-directories are searched
        max_file_size_mb: Files above this size are not scanned

    Example:
        >>> config = SearchConfig(needle="TODO", file_pattern="*.py")
        >>> config.compiled_file_pattern.matches("setup.py")
        True
    """

    model_config = ConfigDict(validate_assignment=True)

    needle: str = Field(..., description="Text to look for in file contents")
    root: str = Field(default=DEFAULT_ROOT, description="Directory to start from")
    file_pattern: str = Field(default=DEFAULT_FILE_PATTERN, description="File name glob")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Timeout in ms")
    max_workers: int = Field(
        default=MAX_WORKER_THREADS,
        ge=1,
        le=MAX_WORKER_THREADS_LIMIT,
        description="Content scanning threads",
    )
    ignores: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS),
        description="Path component globs to skip",
    )
    include_hidden: bool = Field(default=True, description="Search dot-files and dot-dirs")
    max_file_size_mb: float = Field(
        default=MAX_FILE_SIZE_MB, gt=0, description="Largest file that is scanned"
    )

    @field_validator("needle")
    @classmethod
    def validate_needle(cls, v: str) -> str:
        """Reject an empty needle; it would match every file."""
        if not v:
            raise ValueError("needle cannot be empty")
        return v

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("root cannot be empty")
        return v

    @field_validator("file_pattern")
    @classmethod
    def validate_file_pattern(cls, v: str) -> str:
        """Compile the pattern so a bad glob fails before the walk starts."""
        try:
            compile_cached(v)
        except PatternError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("ignores")
    @classmethod
    def validate_ignores(cls, v: List[str]) -> List[str]:
        patterns = [p.strip() for p in v if p and p.strip()]
        for pattern in patterns:
            try:
                compile_cached(pattern)
            except PatternError as e:
                raise ValueError(f"invalid ignore pattern {pattern!r}: {e}") from e
        return patterns

    @classmethod
    def from_yaml(
        cls, config_path: Union[str, Path], overrides: Optional[Dict[str, Any]] = None
    ) -> "SearchConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to configuration YAML file
            overrides: Values that replace the ones read from the file

        Returns:
            Validated SearchConfig instance

        Raises:
            ConfigurationError: If config file is invalid

        Example:
            >>> config = SearchConfig.from_yaml("wildgrep.yaml", {"timeout_ms": 500})
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError("Invalid YAML syntax in configuration file", str(e))
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {config_path}", str(e))

        if not data:
            raise ConfigurationError("Configuration file is empty")
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Invalid configuration", "top level of the file must be a mapping"
            )

        data.update(overrides or {})
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        """Build a config, turning validation failures into ConfigurationError."""
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", str(e))

    @property
    def root_path(self) -> Path:
        """Search root as given, with ``~`` expanded. Hits are reported under it."""
        return Path(self.root).expanduser()

    @property
    def compiled_file_pattern(self) -> CompiledPattern:
        """File pattern compiled once per distinct text and shared."""
        return compile_cached(self.file_pattern)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def max_file_size_bytes(self) -> int:
        return int(self.max_file_size_mb * 1024 * 1024)

    def to_yaml(self, output_path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Args:
            output_path: Path to save configuration
        """
        output_path = Path(output_path)
        data = self.model_dump()

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
        except OSError as e:
            raise ConfigurationError(f"Failed to write configuration to {output_path}", str(e))
