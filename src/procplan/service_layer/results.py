"""Success/failure results returned by the message bus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Unit:
    """Type of the value returned by operations that produce nothing."""

    _instance: Unit | None = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNIT"


UNIT = Unit()


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of handling a command.

    Exactly one of ``value`` and ``error`` is meaningful: a successful result
    has ``error=None``; a failed result carries the exception that classified
    the failure and ``value=None``.
    """

    value: T | None = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: Any = UNIT) -> Result:
        """Build a successful result (defaults to the unit value)."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> Result:
        """Build a failed result carrying ``error``."""
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        """True if the command completed."""
        return self.error is None

    @property
    def failed(self) -> bool:
        """True if the command was rejected."""
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error for a failed result."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
