"""
Facade over the repositories exposing the operations the web layer calls.
"""

from sqlalchemy.ext.asyncio import AsyncEngine
from lightbnb.config import Settings, get_settings
from lightbnb.database import create_engine, check_database_connection, close_engine
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.result import Result
from lightbnb.schemas.property import Property, PropertyCreate, PropertyListing, PropertySearchOptions
from lightbnb.schemas.reservation import PastReservation
from lightbnb.schemas.user import User, UserCreate
from typing import Any, Dict, List, Optional, Union


class LightBnBStore:
    """
    Users, reservations and properties behind one shared engine.
    Calls may run concurrently; the engine's pool hands each its own connection.
    """

    def __init__(self, engine: AsyncEngine, settings: Optional[Settings] = None):
        self.engine = engine
        self.settings = settings or get_settings()
        self.users = UserRepository(engine, self.settings)
        self.reservations = ReservationRepository(engine, self.settings)
        self.properties = PropertyRepository(engine, self.settings)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LightBnBStore":
        settings = settings or get_settings()
        return cls(create_engine(settings), settings)

    async def get_user_with_email(self, email: str) -> Result[User]:
        return await self.users.get_user_with_email(email)

    async def get_user_with_id(self, user_id: int) -> Result[User]:
        return await self.users.get_user_with_id(user_id)

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> Result[User]:
        return await self.users.add_user(user)

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> Result[List[PastReservation]]:
        return await self.reservations.get_all_reservations(guest_id, limit)

    async def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Dict[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> Result[List[PropertyListing]]:
        return await self.properties.get_all_properties(options, limit)

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> Result[Property]:
        return await self.properties.add_property(property_data)

    async def check_connection(self) -> bool:
        return await check_database_connection(self.engine)

    async def close(self) -> None:
        await close_engine(self.engine)
