"""
Reservation repository: a guest's past stays with the reserved property and its rating.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.query import SelectQuery
from lightbnb.repositories.result import Result
from lightbnb.schemas.reservation import PastReservation
from typing import List, Optional

PAST_RESERVATION_COLUMNS = """properties.*,
  reservations.id AS reservation_id,
  reservations.guest_id,
  reservations.start_date,
  reservations.end_date,
  AVG(property_reviews.rating) AS average_rating"""

PAST_RESERVATION_FROM = """reservations
JOIN properties ON reservations.property_id = properties.id
JOIN property_reviews ON properties.id = property_reviews.property_id"""


class ReservationRepository(BaseRepository):
    """Read-only repository for the reservations table."""

    def build_past_reservations_query(self, guest_id: int, limit: Optional[int] = None) -> SelectQuery:
        query = SelectQuery(PAST_RESERVATION_COLUMNS, PAST_RESERVATION_FROM)
        query.where.add("reservations.guest_id = {}", guest_id)
        query.where.add_static("reservations.end_date < CURRENT_DATE")
        query.group_by = "properties.id, reservations.id"
        query.order_by = "reservations.start_date DESC"
        query.limit = self.resolve_limit(limit)
        return query

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> Result[List[PastReservation]]:
        """
        Get a guest's reservations that ended before today, newest first.

        Args:
            guest_id: ID of the guest
            limit: Maximum rows, default_result_limit when omitted

        Returns:
            Found(list of PastReservation) or Failed

        Raises:
            ValueError: If limit is out of range
        """
        query = self.build_past_reservations_query(guest_id, limit)
        return await self.fetch_many("get_all_reservations", query.compile(), PastReservation)

