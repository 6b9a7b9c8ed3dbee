"""
Utility modules for the LightBnB data access layer.
"""

from .exceptions import (
    RepositoryError,
    QueryExecutionError,
    IntegrityViolationError,
    DuplicateRecordError,
    translate_error,
)

from .money import dollars_to_cents, cents_to_dollars

__all__ = [
    "RepositoryError",
    "QueryExecutionError",
    "IntegrityViolationError",
    "DuplicateRecordError",
    "translate_error",
    "dollars_to_cents",
    "cents_to_dollars",
]
