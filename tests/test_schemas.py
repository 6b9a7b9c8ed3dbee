"""
Tests for input schemas, money conversion and settings.
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from lightbnb.config import Settings
from lightbnb.schemas.property import PROPERTY_INSERT_COLUMNS, Property, PropertyCreate, PropertySearchOptions
from lightbnb.schemas.user import UserCreate, normalize_email
from lightbnb.utils.money import dollars_to_cents, cents_to_dollars
from tests.conftest import PropertyFactory, UserFactory


class TestMoney:
    """Test dollars/cents conversion."""

    @pytest.mark.parametrize("dollars,cents", [
        (100, 10000),
        ("100", 10000),
        (19.99, 1999),
        (0.29, 29),
        (Decimal("0.005"), 1),
        (0, 0),
    ])
    def test_dollars_to_cents(self, dollars, cents):
        assert dollars_to_cents(dollars) == cents

    @pytest.mark.parametrize("bad", ["abc", float("nan"), float("inf"), True])
    def test_invalid_amounts(self, bad):
        with pytest.raises(ValueError):
            dollars_to_cents(bad)

    def test_cents_to_dollars(self):
        assert cents_to_dollars(1999) == Decimal("19.99")

    def test_property_row_reports_dollars(self):
        listing = Property(**PropertyFactory.property_row(cost_per_night=1999))
        assert listing.cost_per_night_dollars == Decimal("19.99")


class TestUserCreate:
    """Test user input validation."""

    def test_email_lowercased(self):
        user = UserCreate(**UserFactory.create_user_data(email="  Alice@Example.COM"))
        assert user.email == "alice@example.com"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(**UserFactory.create_user_data(email="not-an-email"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            UserCreate(**UserFactory.create_user_data(name="   "))

    def test_normalize_email(self):
        assert normalize_email(" Bob@Example.com ") == "bob@example.com"


class TestPropertyCreate:
    """Test listing input and insert parameter order."""

    def test_insert_values_follow_column_order_and_use_cents(self):
        data = PropertyFactory.create_property_data(cost_per_night=150, owner_id=7)
        # Key order of the input must not matter
        shuffled = dict(reversed(list(data.items())))

        values = PropertyCreate(**shuffled).insert_values()

        assert len(values) == len(PROPERTY_INSERT_COLUMNS) == 14
        assert values[0] == "Speed lamp"
        assert values[PROPERTY_INSERT_COLUMNS.index("cost_per_night")] == 15000
        assert values[-1] == 7
        assert values[PROPERTY_INSERT_COLUMNS.index("city")] == "Vancouver"

    def test_missing_field_rejected(self):
        data = PropertyFactory.create_property_data()
        del data["post_code"]
        with pytest.raises(ValidationError):
            PropertyCreate(**data)

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            PropertyCreate(**PropertyFactory.create_property_data(cost_per_night=-1))


class TestPropertySearchOptions:
    """Test search option validation."""

    def test_blank_city_is_no_filter(self):
        assert PropertySearchOptions(city="  ").city is None

    def test_blank_numbers_are_no_filter(self):
        options = PropertySearchOptions(owner_id="", minimum_price_per_night=" ", minimum_rating="")
        assert options.owner_id is None
        assert options.minimum_price_per_night is None
        assert options.minimum_rating is None

    def test_non_numeric_text_still_rejected(self):
        with pytest.raises(ValidationError):
            PropertySearchOptions(owner_id="abc")

    def test_min_price_above_max_rejected(self):
        with pytest.raises(ValidationError):
            PropertySearchOptions(minimum_price_per_night=200, maximum_price_per_night=100)

    def test_rating_range(self):
        with pytest.raises(ValidationError):
            PropertySearchOptions(minimum_rating=6)


class TestSettings:
    """Test settings parsing."""

    def test_database_url_built_from_components(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        settings = Settings(
            postgres_host="db",
            postgres_port=5433,
            postgres_user="lbnb",
            postgres_password="secret",
            postgres_db="lightbnb_test",
        )
        assert settings.database_url == "postgresql+asyncpg://lbnb:secret@db:5433/lightbnb_test"

    def test_plain_postgres_url_gets_async_driver(self):
        settings = Settings(database_url="postgresql://u:p@host:5432/db")
        assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="local")

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ValidationError):
            Settings(default_result_limit=0)
