"""
Typed outcomes of repository operations.

A lookup that matched nothing (NotFound) and a statement that failed (Failed)
are distinct, so callers no longer have to guess from an empty value.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union
from lightbnb.utils.exceptions import RepositoryError

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The statement succeeded and produced value."""

    value: T

    @property
    def is_found(self) -> bool:
        return True

    def value_or(self, default: Any = None) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """The statement succeeded but matched no row."""

    @property
    def is_found(self) -> bool:
        return False

    def value_or(self, default: Any = None) -> Any:
        return default

    def unwrap(self) -> None:
        return None


@dataclass(frozen=True)
class Failed:
    """The statement failed; error carries the translated exception."""

    error: RepositoryError

    @property
    def is_found(self) -> bool:
        return False

    def value_or(self, default: Any = None) -> Any:
        return default

    def unwrap(self):
        raise self.error


Result = Union[Found[T], NotFound, Failed]


def from_optional(value: Optional[T]) -> "Result[T]":
    """Found when value is not None, NotFound otherwise."""
    if value is None:
        return NotFound()
    return Found(value)
