"""Configuration module for archlookup."""

from archlookup.config.settings import LoggingConfig, LookupConfig, load_config

__all__ = ["LoggingConfig", "LookupConfig", "load_config"]
