"""
Membership Repository

Centralizes all database operations for team memberships.
A membership is stored as its own document so that (team_id, user_id)
uniqueness can be enforced by a compound index.
"""

from typing import Any, Dict, List, Optional

from teamscope.core.constants import MEMBERSHIPS_COLLECTION
from teamscope.models.membership import Membership
from teamscope.repositories.base import BaseRepository


class MembershipRepository(BaseRepository[Membership]):
    """Repository for membership database operations."""

    collection_name = MEMBERSHIPS_COLLECTION
    model_class = Membership

    def _to_document(self, model: Membership) -> Dict[str, Any]:
        doc = model.model_dump(by_alias=True)
        doc["role"] = model.role.value
        return doc

    async def get(self, team_id: str, user_id: str) -> Optional[Membership]:
        """Get the membership of a user on a team."""
        return await self.find_one({"team_id": team_id, "user_id": user_id})

    async def find_by_user(self, user_id: str) -> List[Membership]:
        """Find every membership held by a user."""
        return await self.find_all({"user_id": user_id})

    async def find_by_team(self, team_id: str) -> List[Membership]:
        """Find every membership on a team."""
        return await self.find_all({"team_id": team_id})
