"""Configuration for architecture lookups.

Configuration can be loaded from a YAML file and validated at startup. Every
field has a default, so running without a config file is the normal case.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from archlookup.utils.logging import FORMATS, LEVELS
from archlookup.utils.result import ConfigError, Err, Ok, Result

CONFIG_FILENAME = "archlookup.yaml"
ARCH_ENV_VAR = "ARCHLOOKUP_ARCH"


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "info"
    format: str = "json"


@dataclass
class LookupConfig:
    """
    Lookup configuration.

    Attributes:
        normalize_case: Lowercase lookup keys before matching. Off by default,
            so only the exact stored form of a key matches.
        arch_override: Architecture string to report as the current
            environment instead of asking the platform.
        logging: Logging settings
    """

    normalize_case: bool = False
    arch_override: Optional[str] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> Result["LookupConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)

        if not path.exists():
            return Err(ConfigError(
                field="path",
                message=f"Configuration file not found: {path}",
            ))

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            return Err(ConfigError(
                field="yaml",
                message=f"Failed to parse YAML: {e}",
            ))
        except OSError as e:
            return Err(ConfigError(
                field="file",
                message=f"Failed to read config file: {e}",
            ))

        if not isinstance(data, dict):
            return Err(ConfigError(
                field="yaml",
                message=f"Expected a mapping at top level, got {type(data).__name__}",
            ))

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result["LookupConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Result with loaded config or error
        """
        normalize_case = data.get("normalize_case", False)
        if not isinstance(normalize_case, bool):
            return Err(ConfigError(
                field="normalize_case",
                message=f"Must be a boolean, got {normalize_case!r}",
            ))

        arch_override = data.get("arch_override")
        if arch_override is not None and not isinstance(arch_override, str):
            return Err(ConfigError(
                field="arch_override",
                message=f"Must be a string, got {arch_override!r}",
            ))

        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            return Err(ConfigError(
                field="logging",
                message="Must be a mapping",
            ))

        config = cls(
            normalize_case=normalize_case,
            arch_override=arch_override,
            logging=LoggingConfig(
                level=str(logging_data.get("level", "info")),
                format=str(logging_data.get("format", "json")),
            ),
        )
        return Ok(config)

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Returns:
            Result indicating success or validation error
        """
        if self.arch_override is not None and not self.arch_override.strip():
            return Err(ConfigError(
                field="arch_override",
                message="Must not be blank",
            ))

        if self.logging.level.lower() not in LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Must be one of {sorted(LEVELS)}, got {self.logging.level!r}",
            ))

        if self.logging.format not in FORMATS:
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be one of {list(FORMATS)}, got {self.logging.format!r}",
            ))

        return Ok(None)


def load_config(config_dir: Path = None) -> Result[LookupConfig, ConfigError]:
    """
    Load configuration from the standard location.

    Reads ``archlookup.yaml`` from the config directory if present, otherwise
    uses defaults.

    Args:
        config_dir: Configuration directory (defaults to ./config)

    Returns:
        Result with loaded config or error
    """
    if config_dir is None:
        config_dir = Path("./config")

    config_path = Path(config_dir) / CONFIG_FILENAME
    if config_path.exists():
        result = LookupConfig.from_yaml(config_path)
        if result.is_err():
            return result
        config = result.unwrap()
    else:
        config = LookupConfig()

    validation_result = config.validate()
    if validation_result.is_err():
        return Err(validation_result.unwrap_err())

    return Ok(config)


def get_env_arch_override() -> Optional[str]:
    """Get the architecture override from environment."""
    return os.environ.get(ARCH_ENV_VAR)
