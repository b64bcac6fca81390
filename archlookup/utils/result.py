"""Result values returned by lookups and configuration loading.

A lookup that finds nothing is an expected outcome, not an exception. It
comes back as ``Err(UnknownArchitecture(key))``; a hit comes back as
``Ok(processor)``. Config loading uses the same pair with ``ConfigError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, Optional, TypeVar, Union

T = TypeVar("T")  # Found value, e.g. a Processor
E = TypeVar("E")  # Reason nothing was found
U = TypeVar("U")


class ResultError(Exception):
    """Raised when a value is read from the wrong side of a result."""

    pass


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A lookup or load that produced a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the found value; ``default`` is ignored."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ResultError(f"Expected a failed result, found {self.value}")

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        """Apply ``fn`` to the found value, e.g. ``result.map(Processor.is_64_bit)``."""
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return fn(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """A lookup or load that produced nothing, carrying the reason."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ResultError(f"No value: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Return ``default``; ``get_processor`` passes None here."""
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable[[T], U]) -> "Err[E]":
        return self

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Err[E]":
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


@dataclass(frozen=True)
class UnknownArchitecture:
    """No descriptor is registered for the given architecture string."""

    key: Optional[str]

    def __str__(self) -> str:
        if not self.key:
            return "No architecture reported"
        return f"Unknown architecture: {self.key!r}"


@dataclass(frozen=True)
class ConfigError:
    """Error in configuration."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"Config error in '{self.field}': {self.message}"
