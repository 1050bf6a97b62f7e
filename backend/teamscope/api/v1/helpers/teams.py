"""
Team Helper Functions

Translate access-control results into HTTP responses.
"""

from typing import List, Optional, Tuple

from fastapi import HTTPException

from teamscope.core.roles import TeamRole
from teamscope.models.membership import Membership
from teamscope.models.team import Team
from teamscope.models.user import User
from teamscope.schemas.team import TeamMemberSchema, TeamResponse, TeamSummary, TypeaheadUser
from teamscope.services.access import (
    AccessControlError,
    TeamAccessDenied,
    TeamAccessService,
    TeamNotFoundError,
    Visible,
)

TEAM_NOT_FOUND_DETAIL = "Team not found"
TEAM_ACCESS_DENIED_DETAIL = "Not enough permissions in this team"


def access_error_to_http(exc: AccessControlError) -> HTTPException:
    """
    Map an engine failure to an HTTPException.

    Hidden and absent teams share one 404 message. Both denial reasons share
    one 403 message.
    """
    if isinstance(exc, TeamNotFoundError):
        return HTTPException(status_code=404, detail=TEAM_NOT_FOUND_DETAIL)
    if isinstance(exc, TeamAccessDenied):
        return HTTPException(status_code=403, detail=TEAM_ACCESS_DENIED_DETAIL)
    return HTTPException(status_code=403, detail=TEAM_ACCESS_DENIED_DETAIL)


async def check_team_access(
    team_id: str,
    user: User,
    service: TeamAccessService,
    required_role: Optional[TeamRole] = None,
) -> Visible:
    """
    Check if a user can see a team, optionally with a minimum role.

    Raises:
        HTTPException: 404 if team not found or hidden, 403 if access denied
    """
    try:
        return await service.require_visible(user.id, team_id, minimum_role=required_role)
    except AccessControlError as exc:
        raise access_error_to_http(exc) from exc


def build_team_summary(team: Team) -> TeamSummary:
    return TeamSummary(
        id=team.id,
        name=team.name,
        description=team.description,
        created_at=team.created_at,
        updated_at=team.updated_at,
    )


def build_team_response(visible: Visible, members: List[Tuple[User, Membership]]) -> TeamResponse:
    team = visible.team
    return TeamResponse(
        id=team.id,
        name=team.name,
        description=team.description,
        created_at=team.created_at,
        updated_at=team.updated_at,
        role=visible.role,
        members=[
            TeamMemberSchema(user_id=user.id, username=user.username, role=membership.role)
            for user, membership in members
        ],
    )


def build_typeahead(users: List[User]) -> List[TypeaheadUser]:
    return [TypeaheadUser(name=user.username) for user in users]
