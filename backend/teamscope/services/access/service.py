"""
Team Access Service

Visibility and role-based authorization over teams:

- resolve:       may a user address a given team?
- teams_for:     which teams may a user enumerate?
- list_members:  which members of a visible team are shown?
- search_users:  typeahead over users who could be added to a team
- search_teams:  name search within the user's own teams

Every call is a fresh read through the MembershipStore. The service keeps no
state between calls and never writes.
"""

import logging
from typing import List, Optional, Tuple, Union

from teamscope.core.config import settings
from teamscope.core.matching import matches, normalize_query, validate_mode
from teamscope.core.metrics import record_access_decision, record_search_results
from teamscope.core.roles import TeamRole, meets
from teamscope.models.membership import Membership
from teamscope.models.team import Team
from teamscope.models.user import User
from teamscope.services.access.store import MembershipStore
from teamscope.services.access.types import (
    Forbidden,
    NotFound,
    Resolution,
    TeamAccessDenied,
    TeamNotFoundError,
    Visible,
)

logger = logging.getLogger(__name__)


def is_addressable(team: Optional[Team]) -> bool:
    """
    The single place where the hidden flag is interpreted.

    The global hidden team is a system sentinel: it behaves as if it did not
    exist for every user, including its own owners.
    """
    return team is not None and not team.hidden


def _user_sort_key(user: User) -> Tuple[str, str]:
    return (user.username, user.id)


def _team_sort_key(team: Team) -> Tuple[str, str, str]:
    return (team.name.casefold(), team.name, team.id)


def _apply_limit(items: List, limit: Optional[int]) -> List:
    """Truncate a sorted result. No limit means every match is returned."""
    if limit is None:
        return items
    return items[: max(limit, 0)]


class TeamAccessService:
    """Read-only access-control engine over a MembershipStore."""

    def __init__(
        self,
        store: MembershipStore,
        match_mode: Optional[str] = None,
        directory_min_role: Union[str, TeamRole, None] = None,
    ):
        self.store = store
        self.match_mode = validate_mode(match_mode or settings.SEARCH_MATCH_MODE)
        self.directory_min_role = TeamRole.parse(
            directory_min_role or settings.DIRECTORY_SEARCH_MIN_ROLE
        )

    # =========================================================================
    # Visibility
    # =========================================================================

    async def resolve(self, requester_id: str, team_id: str) -> Resolution:
        """Decide whether `requester_id` may address `team_id`."""
        team = await self.store.get_team(team_id)
        if not is_addressable(team):
            record_access_decision("resolve", "not_found")
            return NotFound(team_id)

        membership = await self.store.get_membership(team.id, requester_id)
        if membership is None:
            record_access_decision("resolve", "forbidden")
            return Forbidden(team_id)

        record_access_decision("resolve", "visible")
        return Visible(team=team, membership=membership)

    async def require_visible(
        self,
        requester_id: str,
        team_id: str,
        minimum_role: Union[str, TeamRole, None] = None,
    ) -> Visible:
        """
        Raising form of `resolve`, optionally with a role threshold.

        Raises:
            TeamNotFoundError: team is absent or hidden
            TeamAccessDenied: no membership, or membership below `minimum_role`
        """
        resolution = await self.resolve(requester_id, team_id)

        if isinstance(resolution, NotFound):
            logger.debug(f"Team {team_id} not addressable for user {requester_id}")
            raise TeamNotFoundError(team_id)

        if isinstance(resolution, Forbidden):
            logger.info(f"User {requester_id} is not a member of team {team_id}")
            raise TeamAccessDenied.not_a_member(team_id)

        if minimum_role is not None:
            required = TeamRole.parse(minimum_role)
            if not meets(resolution.role, required):
                logger.info(
                    f"User {requester_id} has role {resolution.role.value} on team {team_id}, "
                    f"{required.value} required"
                )
                raise TeamAccessDenied.insufficient_role(team_id, resolution.role, required)

        return resolution

    # =========================================================================
    # Scope
    # =========================================================================

    async def teams_for(self, requester_id: str) -> List[Team]:
        """Teams the requester holds a membership on, minus the hidden team."""
        memberships = await self.store.memberships_of_user(requester_id)

        teams: List[Team] = []
        seen = set()
        for membership in memberships:
            if membership.team_id in seen:
                continue
            seen.add(membership.team_id)

            team = await self.store.get_team(membership.team_id)
            if team is None:
                logger.warning(
                    f"Membership {membership.id} of user {requester_id} points at missing team "
                    f"{membership.team_id}"
                )
                continue
            if not is_addressable(team):
                continue
            teams.append(team)

        return teams

    # =========================================================================
    # Members
    # =========================================================================

    async def list_members(self, requester_id: str, team_id: str) -> List[Tuple[User, Membership]]:
        """Enabled members of a team the requester can see, ordered by username."""
        visible = await self.require_visible(requester_id, team_id)
        return await self.members_of(visible)

    async def members_of(self, visible: Visible) -> List[Tuple[User, Membership]]:
        """Enabled members of an already resolved team, ordered by username."""
        memberships = await self.store.memberships_of_team(visible.team.id)
        users = await self.store.get_users([m.user_id for m in memberships])
        users_by_id = {u.id: u for u in users}

        members = []
        for membership in memberships:
            user = users_by_id.get(membership.user_id)
            if user is None or not user.enabled:
                continue
            members.append((user, membership))

        members.sort(key=lambda pair: _user_sort_key(pair[0]))
        return members

    # =========================================================================
    # Search
    # =========================================================================

    async def search_users(
        self,
        requester_id: str,
        team_id: str,
        query: Optional[str],
        minimum_role: Union[str, TeamRole, None] = None,
        limit: Optional[int] = None,
    ) -> List[User]:
        """
        Enabled users matching `query` who are not yet members of the team.

        The requester must be able to see the team and hold at least
        `minimum_role` on it (the configured directory role by default).

        Raises:
            TeamNotFoundError: team is absent or hidden
            TeamAccessDenied: requester is not a member or below the role threshold
        """
        required = TeamRole.parse(minimum_role or self.directory_min_role)
        try:
            visible = await self.require_visible(requester_id, team_id, minimum_role=required)
        except TeamNotFoundError:
            record_access_decision("search_users", "not_found")
            raise
        except TeamAccessDenied:
            record_access_decision("search_users", "denied")
            raise
        record_access_decision("search_users", "allowed")

        query = normalize_query(query)
        if not query:
            record_search_results("search_users", 0)
            return []

        candidates = await self.store.username_matches(query, self.match_mode)
        existing = await self.store.memberships_of_team(visible.team.id)
        member_ids = {m.user_id for m in existing}

        results = {}
        for user in candidates:
            # The store feed is not trusted: re-check enabled and match
            if not user.enabled:
                continue
            if not matches(user.username, query, self.match_mode):
                continue
            if user.id in member_ids:
                continue
            results[user.id] = user

        ordered = sorted(results.values(), key=_user_sort_key)
        ordered = _apply_limit(ordered, limit)
        record_search_results("search_users", len(ordered))
        return ordered

    async def search_teams(
        self,
        requester_id: str,
        query: Optional[str],
        limit: Optional[int] = None,
    ) -> List[Team]:
        """Teams in the requester's scope whose name matches, ordered by name."""
        query = normalize_query(query)
        scope = await self.teams_for(requester_id)

        found = [team for team in scope if matches(team.name, query, self.match_mode)]
        found.sort(key=_team_sort_key)
        found = _apply_limit(found, limit)

        record_search_results("search_teams", len(found))
        return found
