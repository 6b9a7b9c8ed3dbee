"""
Custom exception classes for the LightBnB data access layer.
Failed statements are mapped onto this hierarchy before being handed back in a result.
"""

from typing import Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

UNIQUE_VIOLATION = "23505"


class RepositoryError(Exception):
    """Base data access exception."""

    def __init__(self, detail: str, operation: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.detail}"
        return self.detail


class QueryExecutionError(RepositoryError):
    """Statement failed in the driver or SQLAlchemy."""


class IntegrityViolationError(RepositoryError):
    """A constraint (foreign key, not-null, check) rejected the statement."""


class DuplicateRecordError(IntegrityViolationError):
    """A unique constraint rejected the statement."""


def _sqlstate(error: IntegrityError) -> Optional[str]:
    orig = getattr(error, "orig", None)
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return code
    return None


def translate_error(error: Exception, operation: str) -> RepositoryError:
    """
    Map a raised exception onto the repository error hierarchy.

    Args:
        error: Exception raised while executing a statement
        operation: Name of the repository operation, used in messages

    Returns:
        RepositoryError subclass with the original exception as __cause__
    """
    if isinstance(error, RepositoryError):
        return error

    if isinstance(error, IntegrityError):
        if _sqlstate(error) == UNIQUE_VIOLATION:
            translated = DuplicateRecordError(str(error.orig), operation)
        else:
            translated = IntegrityViolationError(str(error.orig), operation)
    elif isinstance(error, SQLAlchemyError):
        translated = QueryExecutionError(str(error), operation)
    else:
        translated = QueryExecutionError(f"{type(error).__name__}: {error}", operation)

    translated.__cause__ = error
    return translated
