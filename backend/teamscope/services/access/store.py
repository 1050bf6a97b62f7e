"""
Membership Store

The engine only ever reads teams, memberships and users through this
interface. `MongoMembershipStore` is the production implementation backed by
the repositories; tests use an in-memory implementation.
"""

from typing import List, Optional, Protocol, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase

from teamscope.core.constants import MATCH_MODE_SUBSTRING
from teamscope.models.membership import Membership
from teamscope.models.team import Team
from teamscope.models.user import User
from teamscope.repositories import MembershipRepository, TeamRepository, UserRepository


class MembershipStore(Protocol):
    async def get_team(self, team_id: str) -> Optional[Team]:
        ...

    async def get_membership(self, team_id: str, user_id: str) -> Optional[Membership]:
        ...

    async def memberships_of_user(self, user_id: str) -> List[Membership]:
        ...

    async def memberships_of_team(self, team_id: str) -> List[Membership]:
        ...

    async def get_users(self, user_ids: Sequence[str]) -> List[User]:
        ...

    async def all_enabled_users(self) -> List[User]:
        ...

    async def username_matches(self, query: str, mode: str = MATCH_MODE_SUBSTRING) -> List[User]:
        """Users whose username matches. Implementations should pre-filter on
        `enabled`, but the engine re-checks every candidate."""
        ...


class MongoMembershipStore:
    """MembershipStore over the teams, team_memberships and users collections."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.teams = TeamRepository(db)
        self.memberships = MembershipRepository(db)
        self.users = UserRepository(db)

    async def get_team(self, team_id: str) -> Optional[Team]:
        return await self.teams.get_by_id(team_id)

    async def get_membership(self, team_id: str, user_id: str) -> Optional[Membership]:
        return await self.memberships.get(team_id, user_id)

    async def memberships_of_user(self, user_id: str) -> List[Membership]:
        return await self.memberships.find_by_user(user_id)

    async def memberships_of_team(self, team_id: str) -> List[Membership]:
        return await self.memberships.find_by_team(team_id)

    async def get_users(self, user_ids: Sequence[str]) -> List[User]:
        return await self.users.find_by_ids(list(user_ids))

    async def all_enabled_users(self) -> List[User]:
        return await self.users.find_enabled()

    async def username_matches(self, query: str, mode: str = MATCH_MODE_SUBSTRING) -> List[User]:
        return await self.users.search_by_username(query, mode)
