"""Shared fixtures for archlookup tests."""

import sys

import pytest

from archlookup.config.settings import ARCH_ENV_VAR
from archlookup.registry import ProcessorRegistry
from archlookup.system import StaticArchitectureProvider
from archlookup.utils.logging import configure_logging


@pytest.fixture(autouse=True)
def clear_arch_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's ARCHLOOKUP_ARCH out of every test."""
    monkeypatch.delenv(ARCH_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default logging after tests that reconfigure it."""
    yield
    configure_logging(stream=sys.__stderr__)


@pytest.fixture
def registry() -> ProcessorRegistry:
    return ProcessorRegistry.build(provider=StaticArchitectureProvider("x86_64"))
