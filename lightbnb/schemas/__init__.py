"""
Pydantic schemas for input validation and row mapping.
"""

from .user import UserBase, UserCreate, User, normalize_email

from .property import (
    PROPERTY_INSERT_COLUMNS,
    PropertyBase,
    PropertyCreate,
    Property,
    PropertyListing,
    PropertySearchOptions,
)

from .reservation import PastReservation

__all__ = [
    "UserBase",
    "UserCreate",
    "User",
    "normalize_email",
    "PROPERTY_INSERT_COLUMNS",
    "PropertyBase",
    "PropertyCreate",
    "Property",
    "PropertyListing",
    "PropertySearchOptions",
    "PastReservation",
]
