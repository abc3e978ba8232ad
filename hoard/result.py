"""
Result — value or error, never both.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from hoard.errors import HoardError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a ``try_*`` operation.

    Exactly one of ``value`` / ``error`` is meaningful, selected by ``ok``.
    A successful result may carry ``None`` as its value (a hoard holding
    JSON ``null``), so check ``ok`` rather than the value.
    """
    value: T = None
    error: HoardError | None = None

    @classmethod
    def success(cls, value: Any) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: HoardError) -> "Result":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self):
        """ErrorKind of the failure, or None on success."""
        return None if self.error is None else self.error.kind

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or_none(self) -> T | None:
        """The old null-on-failure behavior."""
        return self.value if self.error is None else None
