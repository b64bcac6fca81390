"""Processor registry for architecture lookups.

This module provides:
- The fixed alias table of known architecture strings
- A read-only registry answering point lookups
- A process-wide default registry built on first use
"""

from archlookup.registry.processors import (
    DEFAULT_ALIASES,
    DuplicateArchitectureKeyError,
    ProcessorRegistry,
    default_registry,
    get_current_processor,
    get_processor,
    iter_aliases,
    registry_from_config,
)

__all__ = [
    "DEFAULT_ALIASES",
    "DuplicateArchitectureKeyError",
    "ProcessorRegistry",
    "default_registry",
    "get_current_processor",
    "get_processor",
    "iter_aliases",
    "registry_from_config",
]
