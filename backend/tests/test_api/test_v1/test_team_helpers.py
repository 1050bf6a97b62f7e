"""Tests for team helper functions that translate engine results to HTTP."""

import asyncio

import pytest
from fastapi import HTTPException

from teamscope.api.v1.helpers.teams import (
    TEAM_ACCESS_DENIED_DETAIL,
    TEAM_NOT_FOUND_DETAIL,
    access_error_to_http,
    build_team_response,
    build_typeahead,
    check_team_access,
)
from teamscope.core.roles import TeamRole
from teamscope.models.user import User
from teamscope.services.access import TeamAccessDenied, TeamNotFoundError


class TestAccessErrorToHttp:
    def test_not_found(self):
        exc = access_error_to_http(TeamNotFoundError("t1"))
        assert exc.status_code == 404
        assert exc.detail == TEAM_NOT_FOUND_DETAIL

    def test_both_denial_reasons_look_the_same(self):
        a = access_error_to_http(TeamAccessDenied.not_a_member("t1"))
        b = access_error_to_http(
            TeamAccessDenied.insufficient_role("t1", TeamRole.VIEWER, TeamRole.OWNER)
        )
        assert a.status_code == b.status_code == 403
        assert a.detail == b.detail == TEAM_ACCESS_DENIED_DETAIL


class TestCheckTeamAccess:
    def test_returns_visible(self, qa_world, service):
        visible = asyncio.run(check_team_access(qa_world["team"].id, qa_world["owner"], service))
        assert visible.role is TeamRole.OWNER

    def test_role_threshold(self, qa_world, service):
        viewer = qa_world["store"].add_user("viewer")
        qa_world["store"].add_membership(qa_world["team"], viewer, TeamRole.VIEWER)

        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(
                check_team_access(qa_world["team"].id, viewer, service, required_role=TeamRole.OWNER)
            )

        assert exc_info.value.status_code == 403


class TestBuilders:
    def test_team_response(self, qa_world, service):
        visible = asyncio.run(check_team_access(qa_world["team"].id, qa_world["owner"], service))
        members = asyncio.run(service.list_members(qa_world["owner"].id, qa_world["team"].id))

        response = build_team_response(visible, members)

        assert response.id == qa_world["team"].id
        assert response.description == "short test description"
        assert [m.username for m in response.members] == ["owner"]

    def test_typeahead_payload(self):
        payload = build_typeahead([User(username="user2"), User(username="user3")])
        assert [p.name for p in payload] == ["user2", "user3"]
