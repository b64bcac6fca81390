"""Tests for the Processor descriptor and its enums."""

import dataclasses

import pytest

from archlookup.models import Arch, ArchKey, Processor, ProcessorType


def test_processor_predicates_for_64_bit_x86() -> None:
    """A 64-bit x86 descriptor answers only the matching predicates."""
    processor = Processor(Arch.BIT_64, ProcessorType.X86)

    assert processor.is_64_bit()
    assert not processor.is_32_bit()
    assert processor.is_x86()
    assert not processor.is_ia64()
    assert not processor.is_ppc()


def test_processor_predicates_for_unknown() -> None:
    """An unknown descriptor is neither 32 nor 64 bit and has no family."""
    processor = Processor(Arch.UNKNOWN, ProcessorType.UNKNOWN)

    assert not processor.is_32_bit()
    assert not processor.is_64_bit()
    assert not (processor.is_x86() or processor.is_ia64() or processor.is_ppc())


def test_processor_equality_is_by_value() -> None:
    """Separately constructed descriptors with the same fields are equal."""
    a = Processor(Arch.BIT_32, ProcessorType.PPC)
    b = Processor(Arch.BIT_32, ProcessorType.PPC)

    assert a == b
    assert hash(a) == hash(b)
    assert a != Processor(Arch.BIT_64, ProcessorType.PPC)


def test_processor_is_frozen() -> None:
    """Descriptors cannot be mutated."""
    processor = Processor(Arch.BIT_32, ProcessorType.X86)
    with pytest.raises(dataclasses.FrozenInstanceError):
        processor.arch = Arch.BIT_64  # type: ignore[misc]


def test_processor_str_and_dict() -> None:
    processor = Processor(Arch.BIT_64, ProcessorType.IA_64)

    assert str(processor) == "Intel Itanium 64-bit"
    assert processor.to_dict() == {"arch": "BIT_64", "type": "IA_64"}


def test_arch_key_values_are_lowercase() -> None:
    """Every key token is already in the form the registry stores."""
    for key in ArchKey:
        assert key.value == key.value.lower()
        assert str(key) == key.value


def test_labels() -> None:
    assert Arch.BIT_32.label == "32-bit"
    assert ProcessorType.PPC.label == "Apple-IBM-Motorola"
