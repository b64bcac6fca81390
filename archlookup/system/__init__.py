"""Runtime environment collaborators."""

from archlookup.system.environment import (
    ArchitectureProvider,
    PlatformArchitectureProvider,
    StaticArchitectureProvider,
    provider_from_config,
)

__all__ = [
    "ArchitectureProvider",
    "PlatformArchitectureProvider",
    "StaticArchitectureProvider",
    "provider_from_config",
]
