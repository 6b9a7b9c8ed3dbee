"""
Test configuration and fixtures for the LightBnB data access layer.
Provides a mocked async engine that records statements, row factories and repository fixtures.
"""

import pytest
from datetime import date
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

from lightbnb.config import Settings
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.store import LightBnBStore


def mock_engine(rows: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None) -> MagicMock:
    """
    AsyncEngine double built from unittest.mock.

    engine.connect() and engine.begin() both yield engine.connection, whose
    execute() returns engine.rows, or raises engine.error when set. Both
    attributes can be changed after the engine is built.
    """
    engine = MagicMock(name="AsyncEngine")
    engine.rows = rows or []
    engine.error = error

    async def execute(statement, params=None):
        if engine.error is not None:
            raise engine.error
        result = MagicMock(name="CursorResult")
        result.mappings.return_value.all.return_value = list(engine.rows)
        result.scalar.return_value = 1
        return result

    connection = MagicMock(name="AsyncConnection")
    connection.execute = AsyncMock(side_effect=execute)
    engine.connection = connection

    context = MagicMock(name="ConnectionContext")
    context.__aenter__ = AsyncMock(return_value=connection)
    context.__aexit__ = AsyncMock(return_value=False)
    engine.connect.return_value = context
    engine.begin.return_value = context

    engine.dispose = AsyncMock()
    return engine


def executed_sql(engine: MagicMock) -> str:
    """SQL text of the last statement run on engine."""
    statement = engine.connection.execute.await_args.args[0]
    return str(statement)


def executed_params(engine: MagicMock) -> Dict[str, Any]:
    """Bound parameters of the last statement run on engine."""
    args = engine.connection.execute.await_args.args
    return dict(args[1]) if len(args) > 1 else {}


class FakeDriverError(Exception):
    """asyncpg-like error carrying a SQLSTATE."""

    def __init__(self, message: str, sqlstate: str):
        super().__init__(message)
        self.sqlstate = sqlstate


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="testing", default_result_limit=10, max_result_limit=100)


@pytest.fixture
def engine() -> MagicMock:
    return mock_engine()


@pytest.fixture
def user_repository(engine: MagicMock, settings: Settings) -> UserRepository:
    return UserRepository(engine, settings)


@pytest.fixture
def property_repository(engine: MagicMock, settings: Settings) -> PropertyRepository:
    return PropertyRepository(engine, settings)


@pytest.fixture
def reservation_repository(engine: MagicMock, settings: Settings) -> ReservationRepository:
    return ReservationRepository(engine, settings)


@pytest.fixture
def store(engine: MagicMock, settings: Settings) -> LightBnBStore:
    return LightBnBStore(engine, settings)


# Test data factories
class UserFactory:
    """Factory for user input and stored user rows."""

    @staticmethod
    def create_user_data(
        name: str = "Alice Smith",
        email: str = "alice@example.com",
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
    ) -> dict:
        return {"name": name, "email": email, "password": password}

    @staticmethod
    def user_row(id: int = 1, **overrides) -> dict:
        row = {"id": id, **UserFactory.create_user_data()}
        row.update(overrides)
        return row


class PropertyFactory:
    """Factory for property input and stored property rows."""

    @staticmethod
    def create_property_data(**overrides) -> dict:
        data = {
            "title": "Speed lamp",
            "description": "description",
            "number_of_bedrooms": 3,
            "number_of_bathrooms": 2,
            "parking_spaces": 1,
            "cost_per_night": 150,
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "street": "536 Namsub Highway",
            "country": "Canada",
            "city": "Vancouver",
            "province": "British Columbia",
            "post_code": "28142",
            "owner_id": 1,
        }
        data.update(overrides)
        return data

    @staticmethod
    def property_row(id: int = 1, **overrides) -> dict:
        row = PropertyFactory.create_property_data(cost_per_night=15000)
        row["id"] = id
        row.update(overrides)
        return row

    @staticmethod
    def listing_row(id: int = 1, average_rating: Optional[float] = 4.5, **overrides) -> dict:
        row = PropertyFactory.property_row(id, **overrides)
        row["average_rating"] = average_rating
        return row


class ReservationFactory:
    """Factory for past reservation rows (property columns plus reservation columns)."""

    @staticmethod
    def past_reservation_row(
        reservation_id: int = 1,
        property_id: int = 1,
        guest_id: int = 1,
        start_date: date = date(2020, 1, 1),
        end_date: date = date(2020, 1, 8),
        average_rating: Optional[float] = 4.0
    ) -> dict:
        row = PropertyFactory.listing_row(property_id, average_rating=average_rating)
        row.update({
            "reservation_id": reservation_id,
            "guest_id": guest_id,
            "start_date": start_date,
            "end_date": end_date,
        })
        return row
