"""
User repository: lookups by id or email and user creation.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.query import SelectQuery, insert_query
from lightbnb.repositories.result import Result
from lightbnb.schemas.user import User, UserCreate, normalize_email
from typing import Any, Dict, Union
import logging

logger = logging.getLogger(__name__)

USER_INSERT_COLUMNS = ("name", "email", "password")


class UserRepository(BaseRepository):
    """Repository for the users table."""

    async def get_user_with_email(self, email: str) -> Result[User]:
        """
        Get a single user given their email.

        Args:
            email: Email in any letter case

        Returns:
            Found(User), NotFound, or Failed
        """
        query = SelectQuery("*", "users")
        query.where.add("lower(email) = {}", normalize_email(email))
        return await self.fetch_one("get_user_with_email", query.compile(), User)

    async def get_user_with_id(self, user_id: int) -> Result[User]:
        """Get a single user given their id."""
        query = SelectQuery("*", "users")
        query.where.add("id = {}", user_id)
        return await self.fetch_one("get_user_with_id", query.compile(), User)

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> Result[User]:
        """
        Add a new user.

        Args:
            user: UserCreate or a dict with name, email and password (already hashed)

        Returns:
            Found(User) with the created row, or Failed (DuplicateRecordError when the
            email is taken)

        Raises:
            pydantic.ValidationError: If user data is invalid
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(user)

        values = [user.name, user.email, user.password]
        query = insert_query("users", USER_INSERT_COLUMNS, values)
        result = await self.fetch_one("add_user", query, User, write=True)
        if result.is_found:
            logger.info(f"Created user {result.value.id}")
        return result
