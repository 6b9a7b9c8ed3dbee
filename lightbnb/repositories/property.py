"""
Property repository for listing search and creation.
Search filters are optional and each one contributes a single predicate to the query.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.query import SelectQuery, insert_query, escape_like
from lightbnb.repositories.result import Result
from lightbnb.schemas.property import (
    PROPERTY_INSERT_COLUMNS,
    Property,
    PropertyCreate,
    PropertyListing,
    PropertySearchOptions,
)
from lightbnb.utils.money import dollars_to_cents
from typing import Any, Dict, List, Optional, Union
import logging

logger = logging.getLogger(__name__)

LISTING_COLUMNS = "properties.*, AVG(property_reviews.rating) AS average_rating"
LISTING_FROM = "properties\nJOIN property_reviews ON properties.id = property_reviews.property_id"


class PropertyRepository(BaseRepository):
    """Repository for the properties table."""

    def build_search_query(
        self,
        options: Union[PropertySearchOptions, Dict[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> SelectQuery:
        """
        Assemble the property search query.

        Args:
            options: Search filters; prices in dollars
            limit: Maximum rows, default_result_limit when omitted

        Returns:
            SelectQuery ready to compile
        """
        options = _coerce_options(options)

        query = SelectQuery(LISTING_COLUMNS, LISTING_FROM)

        if options.city is not None:
            query.where.add("properties.city ILIKE {}", f"%{escape_like(options.city)}%")

        query.where.add_if(options.owner_id, "properties.owner_id = {}")

        if options.minimum_price_per_night is not None:
            query.where.add(
                "properties.cost_per_night >= {}",
                dollars_to_cents(options.minimum_price_per_night)
            )
        if options.maximum_price_per_night is not None:
            query.where.add(
                "properties.cost_per_night <= {}",
                dollars_to_cents(options.maximum_price_per_night)
            )

        query.group_by = "properties.id"
        query.having.add_if(options.minimum_rating, "AVG(property_reviews.rating) >= {}")
        query.order_by = "properties.cost_per_night ASC, properties.id ASC"
        query.limit = self.resolve_limit(limit)
        return query

    async def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Dict[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> Result[List[PropertyListing]]:
        """
        Search properties, cheapest first.

        Args:
            options: PropertySearchOptions or a dict with city, owner_id,
                     minimum_price_per_night, maximum_price_per_night, minimum_rating
            limit: Maximum rows, default_result_limit when omitted

        Returns:
            Found(list of PropertyListing) or Failed

        Raises:
            pydantic.ValidationError: If options are invalid
            ValueError: If limit is out of range
        """
        query = self.build_search_query(options, limit)
        return await self.fetch_many("get_all_properties", query.compile(), PropertyListing)

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> Result[Property]:
        """
        Add a listing.

        Args:
            property_data: PropertyCreate or a dict of its fields, cost_per_night in dollars

        Returns:
            Found(Property) with the created row (cost_per_night in cents), or Failed

        Raises:
            pydantic.ValidationError: If property data is invalid
        """
        if not isinstance(property_data, PropertyCreate):
            property_data = PropertyCreate.model_validate(property_data)

        query = insert_query("properties", PROPERTY_INSERT_COLUMNS, property_data.insert_values())
        result = await self.fetch_one("add_property", query, Property, write=True)
        if result.is_found:
            logger.info(f"Created property: {result.value.title} (ID: {result.value.id})")
        return result


def _coerce_options(options) -> PropertySearchOptions:
    if options is None:
        return PropertySearchOptions()
    if isinstance(options, PropertySearchOptions):
        return options
    return PropertySearchOptions.model_validate(options)
