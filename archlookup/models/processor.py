"""Processor descriptor models.

A ``Processor`` pairs a bit-width (``Arch``) with a processor family
(``ProcessorType``). ``ArchKey`` enumerates the architecture strings the
registry knows about.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Arch(Enum):
    """Bit-width of a processor architecture."""

    BIT_32 = "32-bit"
    BIT_64 = "64-bit"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        return self.value


class ProcessorType(Enum):
    """Processor family."""

    X86 = "AMD and Intel"
    IA_64 = "Intel Itanium"
    PPC = "Apple-IBM-Motorola"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        return self.value


class ArchKey(Enum):
    """Architecture strings as reported by a runtime (e.g. ``platform.machine()``)."""

    # x86
    X86 = "x86"
    I386 = "i386"
    I486 = "i486"
    I586 = "i586"
    I686 = "i686"
    PENTIUM = "pentium"
    X86_64 = "x86_64"
    AMD64 = "amd64"
    EM64T = "em64t"
    UNIVERSAL = "universal"

    # Itanium
    IA64_32 = "ia64_32"
    IA64N = "ia64n"
    IA64 = "ia64"
    IA64W = "ia64w"

    # PowerPC
    PPC = "ppc"
    POWER = "power"
    POWERPC = "powerpc"
    POWER_PC = "power_pc"
    POWER_RS = "power_rs"
    PPC_64 = "ppc64"
    POWER64 = "power64"
    POWERPC64 = "powerpc64"
    POWER_PC64 = "power_pc64"
    POWER_RS64 = "power_rs64"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Processor:
    """
    Immutable descriptor of a processor architecture.

    Attributes:
        arch: Bit-width of the architecture
        type: Processor family
    """

    arch: Arch
    type: ProcessorType

    def is_32_bit(self) -> bool:
        return self.arch is Arch.BIT_32

    def is_64_bit(self) -> bool:
        return self.arch is Arch.BIT_64

    def is_x86(self) -> bool:
        return self.type is ProcessorType.X86

    def is_ia64(self) -> bool:
        return self.type is ProcessorType.IA_64

    def is_ppc(self) -> bool:
        return self.type is ProcessorType.PPC

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "arch": self.arch.name,
            "type": self.type.name,
        }

    def __str__(self) -> str:
        return f"{self.type.label} {self.arch.label}"
