"""
Pydantic schemas for reservations.
Reservations are read-only in this layer.
"""

from datetime import date
from lightbnb.schemas.property import PropertyListing


class PastReservation(PropertyListing):
    """
    A finished reservation joined with its property.
    Property columns keep their own names; the reservation's id is reservation_id.
    """

    reservation_id: int
    guest_id: int
    start_date: date
    end_date: date
