"""Data models for archlookup."""

from archlookup.models.processor import Arch, ArchKey, Processor, ProcessorType

__all__ = [
    "Arch",
    "ArchKey",
    "Processor",
    "ProcessorType",
]
