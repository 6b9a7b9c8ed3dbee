"""
Repository layer for data access operations.
Builds parameterized SQL and returns typed results instead of raising on database errors.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.result import Found, NotFound, Failed, Result

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository",
    "Found",
    "NotFound",
    "Failed",
    "Result",
]
