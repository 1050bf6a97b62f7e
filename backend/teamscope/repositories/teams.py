"""
Team Repository

Centralizes all database operations for teams.
"""

from typing import Optional

from teamscope.core.constants import TEAMS_COLLECTION
from teamscope.models.team import Team
from teamscope.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository for team database operations."""

    collection_name = TEAMS_COLLECTION
    model_class = Team

    async def get_hidden(self) -> Optional[Team]:
        """Get the global hidden team, if it has been bootstrapped."""
        return await self.find_one({"hidden": True})
