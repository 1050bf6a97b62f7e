from typing import List, Optional

from fastapi import Depends, Query

from teamscope.api import deps
from teamscope.api.router import CustomAPIRouter
from teamscope.api.v1.helpers.teams import (
    access_error_to_http,
    build_team_response,
    build_team_summary,
    build_typeahead,
    check_team_access,
)
from teamscope.models.user import User
from teamscope.schemas.team import TeamResponse, TeamSummary, TypeaheadUser
from teamscope.services.access import AccessControlError, TeamAccessService

router = CustomAPIRouter()


@router.get("/", response_model=List[TeamSummary])
async def read_teams(
    current_user: User = Depends(deps.get_current_active_user),
    service: TeamAccessService = Depends(deps.get_access_service),
):
    """
    List the teams the current user is a member of.
    """
    teams = await service.teams_for(current_user.id)
    teams.sort(key=lambda t: (t.name.casefold(), t.name, t.id))
    return [build_team_summary(team) for team in teams]


@router.get("/search", response_model=List[TeamSummary])
async def search_teams(
    query: Optional[str] = Query(None, description="Case-insensitive part of the team name"),
    limit: Optional[int] = Query(None, ge=1, le=500),
    current_user: User = Depends(deps.get_current_active_user),
    service: TeamAccessService = Depends(deps.get_access_service),
):
    """
    Search the current user's teams by name.
    """
    teams = await service.search_teams(current_user.id, query, limit=limit)
    return [build_team_summary(team) for team in teams]


@router.get("/{team_id}", response_model=TeamResponse)
async def read_team(
    team_id: str,
    current_user: User = Depends(deps.get_current_active_user),
    service: TeamAccessService = Depends(deps.get_access_service),
):
    """
    Get team details. Disabled members are not listed.
    """
    visible = await check_team_access(team_id, current_user, service)
    members = await service.members_of(visible)
    return build_team_response(visible, members)


@router.get("/{team_id}/typeahead", response_model=List[TypeaheadUser])
async def typeahead(
    team_id: str,
    query: str = Query("", description="Case-insensitive part of the username"),
    limit: Optional[int] = Query(None, ge=1, le=500),
    current_user: User = Depends(deps.get_current_active_user),
    service: TeamAccessService = Depends(deps.get_access_service),
):
    """
    Find users that could be added to the team. Requires the directory
    search role (owner by default).
    """
    try:
        users = await service.search_users(current_user.id, team_id, query, limit=limit)
    except AccessControlError as exc:
        raise access_error_to_http(exc) from exc
    return build_typeahead(users)
