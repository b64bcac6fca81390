"""Registry mapping architecture strings to processor descriptors.

The registry is built once from a fixed alias table and never changes after
that, so it can be read from any thread without locking.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Union

from archlookup.config.settings import LookupConfig
from archlookup.models.processor import Arch, ArchKey, Processor, ProcessorType
from archlookup.system.environment import (
    ArchitectureProvider,
    PlatformArchitectureProvider,
    provider_from_config,
)
from archlookup.utils.logging import configure_logging, get_logger
from archlookup.utils.result import Err, Ok, Result, UnknownArchitecture

logger = get_logger("registry.processors")

AliasTable = Sequence[tuple[Processor, Sequence[Union[ArchKey, str]]]]

DEFAULT_ALIASES: AliasTable = (
    (
        Processor(Arch.BIT_32, ProcessorType.X86),
        (ArchKey.X86, ArchKey.I386, ArchKey.I486, ArchKey.I586, ArchKey.I686, ArchKey.PENTIUM),
    ),
    (
        Processor(Arch.BIT_64, ProcessorType.X86),
        (ArchKey.X86_64, ArchKey.AMD64, ArchKey.EM64T, ArchKey.UNIVERSAL),
    ),
    (
        Processor(Arch.BIT_32, ProcessorType.IA_64),
        (ArchKey.IA64_32, ArchKey.IA64N),
    ),
    (
        Processor(Arch.BIT_64, ProcessorType.IA_64),
        (ArchKey.IA64, ArchKey.IA64W),
    ),
    (
        Processor(Arch.BIT_32, ProcessorType.PPC),
        (ArchKey.PPC, ArchKey.POWER, ArchKey.POWERPC, ArchKey.POWER_PC, ArchKey.POWER_RS),
    ),
    (
        Processor(Arch.BIT_64, ProcessorType.PPC),
        (ArchKey.PPC_64, ArchKey.POWER64, ArchKey.POWERPC64, ArchKey.POWER_PC64, ArchKey.POWER_RS64),
    ),
)


class DuplicateArchitectureKeyError(RuntimeError):
    """The alias table maps the same key twice."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key {key} already exists in processor map")
        self.key = key


def iter_aliases(table: AliasTable = DEFAULT_ALIASES) -> Iterable[tuple[str, Processor]]:
    """Yield ``(key, processor)`` pairs from an alias table, lowercased."""
    for processor, keys in table:
        for key in keys:
            yield str(key).lower(), processor


def _build_mapping(table: AliasTable) -> dict[str, Processor]:
    mapping: dict[str, Processor] = {}
    for key, processor in iter_aliases(table):
        if key in mapping:
            raise DuplicateArchitectureKeyError(key)
        mapping[key] = processor
    return mapping


class ProcessorRegistry:
    """
    Read-only lookup from architecture strings to ``Processor`` descriptors.

    Lookups match the stored lowercase keys exactly. ``lookup("X86")`` does not
    find ``"x86"`` unless the registry was created with ``normalize_case=True``.
    """

    def __init__(
        self,
        processors: Mapping[str, Processor],
        provider: Optional[ArchitectureProvider] = None,
        normalize_case: bool = False,
    ) -> None:
        self._processors = MappingProxyType(dict(processors))
        self.provider = provider or PlatformArchitectureProvider()
        self.normalize_case = normalize_case

    @classmethod
    def build(
        cls,
        table: AliasTable = DEFAULT_ALIASES,
        provider: Optional[ArchitectureProvider] = None,
        normalize_case: bool = False,
    ) -> "ProcessorRegistry":
        """
        Build a registry from an alias table.

        Args:
            table: Pairs of descriptor and the keys that map to it
            provider: Source of the current architecture string
            normalize_case: Lowercase lookup keys before matching

        Returns:
            A new registry

        Raises:
            DuplicateArchitectureKeyError: If two aliases share a key
        """
        mapping = _build_mapping(table)
        logger.debug(
            "processor_registry_built",
            keys=len(mapping),
            processors=len(table),
            normalize_case=normalize_case,
        )
        return cls(mapping, provider=provider, normalize_case=normalize_case)

    def lookup(self, key: Optional[str]) -> Result[Processor, UnknownArchitecture]:
        """
        Find the descriptor for an architecture string.

        Args:
            key: Architecture string, e.g. ``"amd64"``

        Returns:
            Ok with the descriptor, or Err if the key is not registered
        """
        if not key:
            return Err(UnknownArchitecture(key))

        if self.normalize_case:
            key = key.lower()

        processor = self._processors.get(key)
        if processor is None:
            return Err(UnknownArchitecture(key))
        return Ok(processor)

    def lookup_current(self) -> Result[Processor, UnknownArchitecture]:
        """Find the descriptor for the architecture the provider reports."""
        value = self.provider.current_architecture()
        result = self.lookup(value)
        if result.is_err():
            logger.debug("current_architecture_unknown", value=value)
        return result

    def keys(self) -> list[str]:
        """Registered keys, in the order they were inserted."""
        return list(self._processors)

    def processors(self) -> list[Processor]:
        """Distinct descriptors, in the order they were registered."""
        return list(dict.fromkeys(self._processors.values()))

    def aliases_for(self, processor: Processor) -> list[str]:
        """Keys that map to ``processor``; empty if it is not registered."""
        return [key for key, value in self._processors.items() if value == processor]

    def as_mapping(self) -> Mapping[str, Processor]:
        """Read-only view of the key to descriptor mapping."""
        return self._processors

    def __contains__(self, key: object) -> bool:
        return key in self._processors

    def __len__(self) -> int:
        return len(self._processors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._processors)


def registry_from_config(
    config: LookupConfig,
    table: AliasTable = DEFAULT_ALIASES,
) -> ProcessorRegistry:
    """
    Build a registry from a loaded configuration.

    Applies the configured logging level and format, then builds a registry
    that honors ``normalize_case`` and ``arch_override``.

    Args:
        config: Loaded lookup configuration
        table: Alias table to build from

    Returns:
        A new registry
    """
    configure_logging(level=config.logging.level, format_type=config.logging.format)
    return ProcessorRegistry.build(
        table,
        provider=provider_from_config(config),
        normalize_case=config.normalize_case,
    )


_default_registry: Optional[ProcessorRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> ProcessorRegistry:
    """The process-wide registry, built once on first use."""
    global _default_registry

    registry = _default_registry
    if registry is not None:
        return registry

    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = ProcessorRegistry.build()
        return _default_registry


def get_processor(key: Optional[str]) -> Optional[Processor]:
    """Descriptor for ``key`` from the default registry, or None."""
    return default_registry().lookup(key).unwrap_or(None)


def get_current_processor() -> Optional[Processor]:
    """Descriptor for the running platform, or None if it is not known."""
    return default_registry().lookup_current().unwrap_or(None)

