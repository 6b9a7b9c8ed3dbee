"""
Base repository with shared statement execution on the async engine.
Every statement goes through here so failures are logged and turned into Failed results in one place.
"""

from sqlalchemy.ext.asyncio import AsyncEngine
from pydantic import BaseModel
from lightbnb.config import Settings, get_settings
from lightbnb.repositories.query import CompiledQuery
from lightbnb.repositories.result import Found, Failed, Result, from_optional
from lightbnb.utils.exceptions import translate_error
from typing import Any, Dict, List, Optional, Type, TypeVar
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository:
    """
    Base repository running compiled queries against a shared AsyncEngine.
    Each call checks out one connection for one statement.
    """

    def __init__(self, engine: AsyncEngine, settings: Optional[Settings] = None):
        """
        Initialize repository with the engine and settings.

        Args:
            engine: Async engine owning the connection pool
            settings: Settings for result limits; defaults to the cached settings
        """
        self.engine = engine
        self.settings = settings or get_settings()

    def resolve_limit(self, limit: Optional[int]) -> int:
        """
        Apply the default limit and reject out-of-range values.

        Raises:
            ValueError: If limit is outside 1..max_result_limit
        """
        if limit is None:
            return self.settings.default_result_limit
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ValueError(f"Limit must be an integer, got {limit!r}")
        if limit < 1 or limit > self.settings.max_result_limit:
            raise ValueError(f"Limit must be between 1 and {self.settings.max_result_limit}")
        return limit

    async def execute(self, query: CompiledQuery, write: bool = False) -> List[Dict[str, Any]]:
        """
        Run a compiled query and return its rows as dicts.

        Args:
            query: SQL with positional placeholders and its parameters
            write: Run inside a transaction that commits on success

        Returns:
            Rows as plain dicts
        """
        statement, binds = query.to_statement()
        logger.debug(f"Executing SQL:\n{query.sql}\nparams={query.params}")

        context = self.engine.begin() if write else self.engine.connect()
        async with context as conn:
            result = await conn.execute(statement, binds)
            rows = [dict(row) for row in result.mappings().all()]

        logger.debug(f"Query returned {len(rows)} rows")
        return rows

    async def fetch_one(
        self,
        operation: str,
        query: CompiledQuery,
        model: Type[ModelType],
        write: bool = False
    ) -> Result[ModelType]:
        """Run query and map its first row, NotFound when there is none."""
        try:
            rows = await self.execute(query, write=write)
            row = model.model_validate(rows[0]) if rows else None
            return from_optional(row)
        except Exception as e:
            return self._failed(operation, e)

    async def fetch_many(
        self,
        operation: str,
        query: CompiledQuery,
        model: Type[ModelType]
    ) -> Result[List[ModelType]]:
        """Run query and map every row; an empty list is still Found."""
        try:
            rows = await self.execute(query)
            return Found([model.model_validate(row) for row in rows])
        except Exception as e:
            return self._failed(operation, e)

    def _failed(self, operation: str, error: Exception) -> Failed:
        translated = translate_error(error, operation)
        logger.error(f"{operation} failed: {translated}")
        return Failed(translated)
