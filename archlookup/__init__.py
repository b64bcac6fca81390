"""Processor architecture lookup.

Maps architecture strings such as ``"amd64"`` or ``"ppc64"`` to a
``Processor`` describing bit-width and family.
"""

__version__ = "1.0.0"

from archlookup.config import LookupConfig, load_config
from archlookup.models import Arch, ArchKey, Processor, ProcessorType
from archlookup.registry import (
    DuplicateArchitectureKeyError,
    ProcessorRegistry,
    default_registry,
    get_current_processor,
    get_processor,
    registry_from_config,
)

__all__ = [
    "__version__",
    "Arch",
    "ArchKey",
    "Processor",
    "ProcessorType",
    "ProcessorRegistry",
    "DuplicateArchitectureKeyError",
    "default_registry",
    "get_processor",
    "get_current_processor",
    "registry_from_config",
    "LookupConfig",
    "load_config",
]
