"""
User Repository

Centralizes all database operations for users.
"""

from typing import List, Optional

from teamscope.core.constants import MATCH_MODE_SUBSTRING, USERS_COLLECTION
from teamscope.core.matching import build_regex_filter
from teamscope.models.user import User
from teamscope.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user database operations."""

    collection_name = USERS_COLLECTION
    model_class = User

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        return await self.find_one({"username": username})

    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        """Find users by list of IDs."""
        if not user_ids:
            return []
        return await self.find_all({"_id": {"$in": user_ids}})

    async def find_enabled(self) -> List[User]:
        """Find all enabled users, ordered by username."""
        return await self.find_all({"enabled": True}, sort_by="username")

    async def search_by_username(self, query: str, mode: str = MATCH_MODE_SUBSTRING) -> List[User]:
        """Find enabled users whose username matches the query, ordered by username."""
        return await self.find_all(
            {"enabled": True, "username": build_regex_filter(query, mode)},
            sort_by="username",
        )
