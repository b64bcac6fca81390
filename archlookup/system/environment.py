"""Sources for the architecture string of the running process."""

from __future__ import annotations

import platform
from abc import ABC, abstractmethod
from typing import Optional

from archlookup.config.settings import LookupConfig, get_env_arch_override
from archlookup.utils.logging import get_logger

logger = get_logger("system.environment")


class ArchitectureProvider(ABC):
    """
    Reports the architecture identifier of the current environment.

    Providers only read the value. They do not validate or normalize it.
    """

    @abstractmethod
    def current_architecture(self) -> Optional[str]:
        """Return the reported architecture string, or None if unavailable."""
        pass


class PlatformArchitectureProvider(ArchitectureProvider):
    """Reads ``ARCHLOOKUP_ARCH`` when set, else ``platform.machine()``."""

    def current_architecture(self) -> Optional[str]:
        override = get_env_arch_override()
        if override:
            logger.debug("architecture_from_env", value=override)
            return override
        return platform.machine() or None


class StaticArchitectureProvider(ArchitectureProvider):
    """Always reports the same value."""

    def __init__(self, value: Optional[str]) -> None:
        self.value = value

    def current_architecture(self) -> Optional[str]:
        return self.value or None

    def __repr__(self) -> str:
        return f"StaticArchitectureProvider({self.value!r})"


def provider_from_config(config: LookupConfig) -> ArchitectureProvider:
    """
    Choose a provider for the given configuration.

    Args:
        config: Loaded lookup configuration

    Returns:
        A static provider if ``arch_override`` is set, the platform provider otherwise
    """
    if config.arch_override:
        return StaticArchitectureProvider(config.arch_override)
    return PlatformArchitectureProvider()
