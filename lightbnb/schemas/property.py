"""
Pydantic schemas for properties.
Handles listing creation input, search options and the rows returned by property queries.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Optional, List, Any
from decimal import Decimal
from lightbnb.utils.money import dollars_to_cents, cents_to_dollars

# Column order of the properties INSERT; bound parameters follow this list.
PROPERTY_INSERT_COLUMNS = (
    "title",
    "description",
    "number_of_bedrooms",
    "number_of_bathrooms",
    "parking_spaces",
    "cost_per_night",
    "thumbnail_photo_url",
    "cover_photo_url",
    "street",
    "country",
    "city",
    "province",
    "post_code",
    "owner_id",
)


class PropertyBase(BaseModel):
    """Fields shared by listing input and stored rows."""

    title: str = Field(..., min_length=1, max_length=255, description="Listing title")
    description: Optional[str] = Field(None, description="Listing description")

    number_of_bedrooms: int = Field(..., ge=0, description="Number of bedrooms")
    number_of_bathrooms: int = Field(..., ge=0, description="Number of bathrooms")
    parking_spaces: int = Field(..., ge=0, description="Number of parking spaces")

    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)

    street: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255)
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)

    owner_id: int = Field(..., gt=0, description="ID of the owning user")


class PropertyCreate(PropertyBase):
    """Schema for creating a listing. cost_per_night is given in dollars."""

    cost_per_night: Decimal = Field(..., ge=0, description="Nightly rate in dollars")

    @field_validator("title", "street", "country", "city", "province", "post_code")
    @classmethod
    def strip_text(cls, v):
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    def insert_values(self) -> List[Any]:
        """
        Positional parameters for the properties INSERT.

        Returns:
            Values ordered like PROPERTY_INSERT_COLUMNS, with cost_per_night in cents
        """
        values = self.model_dump()
        values["cost_per_night"] = dollars_to_cents(self.cost_per_night)
        return [values[column] for column in PROPERTY_INSERT_COLUMNS]


class Property(PropertyBase):
    """Property row as stored in the properties table."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    cost_per_night: int = Field(..., description="Nightly rate in cents")

    @property
    def cost_per_night_dollars(self) -> Decimal:
        """Nightly rate in dollars, for display."""
        return cents_to_dollars(self.cost_per_night)


class PropertyListing(Property):
    """Property row joined with its average review rating."""

    average_rating: Optional[float] = None


class PropertySearchOptions(BaseModel):
    """Optional filters for property search. Prices are in dollars."""

    city: Optional[str] = Field(None, description="Partial, case-insensitive city match")
    owner_id: Optional[int] = Field(None, gt=0, description="Only listings of this owner")
    minimum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    maximum_price_per_night: Optional[Decimal] = Field(None, ge=0)
    minimum_rating: Optional[Decimal] = Field(None, ge=0, le=5)

    @field_validator("city")
    @classmethod
    def clean_city(cls, v):
        """Blank city means no city filter."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator(
        "owner_id",
        "minimum_price_per_night",
        "maximum_price_per_night",
        "minimum_rating",
        mode="before",
    )
    @classmethod
    def blank_number_is_none(cls, v):
        """Search forms submit empty fields as blank strings."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_price_range(self):
        """Ensure minimum price does not exceed maximum price."""
        if (
            self.minimum_price_per_night is not None
            and self.maximum_price_per_night is not None
            and self.minimum_price_per_night > self.maximum_price_per_night
        ):
            raise ValueError("minimum_price_per_night cannot exceed maximum_price_per_night")
        return self
