"""Utility modules for archlookup."""

from archlookup.utils.logging import configure_logging, get_logger
from archlookup.utils.result import (
    ConfigError,
    Err,
    Ok,
    Result,
    ResultError,
    UnknownArchitecture,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Results
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "UnknownArchitecture",
    "ConfigError",
]
