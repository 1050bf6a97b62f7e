"""Tests for team API endpoints.

Covers team visibility, the member listing, typeahead role gating and the
scoped team search.
"""

import asyncio

import pytest
from fastapi import HTTPException

from teamscope.core.roles import TeamRole


class TestReadTeam:
    def test_members_can_view(self, qa_world, client_for):
        response = client_for(qa_world["owner"]).get(f"/api/v1/teams/{qa_world['team'].id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == qa_world["team"].id
        assert body["name"] == "qa team"
        assert body["role"] == "owner"

    def test_non_members_blocked(self, qa_world, client_for):
        stranger = qa_world["store"].add_user("stranger")

        response = client_for(stranger).get(f"/api/v1/teams/{qa_world['team'].id}")

        assert response.status_code == 403
        assert response.json()["detail"] == "Not enough permissions in this team"

    def test_hidden_team_looks_absent(self, qa_world, client_for):
        client = client_for(qa_world["owner"])

        hidden = client.get(f"/api/v1/teams/{qa_world['hidden'].id}")
        missing = client.get("/api/v1/teams/does-not-exist")

        assert hidden.status_code == missing.status_code == 404
        assert hidden.json() == missing.json()

    def test_disabled_users_not_displayed(self, qa_world, client_for):
        store = qa_world["store"]
        disabled = store.add_user("ghost", enabled=False)
        store.add_membership(qa_world["team"], disabled, TeamRole.VIEWER)

        response = client_for(qa_world["owner"]).get(f"/api/v1/teams/{qa_world['team'].id}")

        assert response.status_code == 200
        assert [m["username"] for m in response.json()["members"]] == ["owner"]

    def test_team_resolved_once_per_request(self, qa_world, client_for):
        store = qa_world["store"]
        lookups = []
        get_team = store.get_team

        async def counting_get_team(team_id):
            lookups.append(team_id)
            return await get_team(team_id)

        store.get_team = counting_get_team

        response = client_for(qa_world["owner"]).get(f"/api/v1/teams/{qa_world['team'].id}")

        assert response.status_code == 200
        assert lookups == [qa_world["team"].id]


class TestReadTeams:
    def test_only_own_teams(self, qa_world, client_for):
        store = qa_world["store"]
        other = store.add_user("other")
        store.add_membership(store.add_team("another team"), other, TeamRole.OWNER)

        response = client_for(qa_world["owner"]).get("/api/v1/teams/")

        assert response.status_code == 200
        assert [t["name"] for t in response.json()] == ["qa team"]

    def test_empty_for_user_without_teams(self, qa_world, client_for):
        response = client_for(qa_world["admin"]).get("/api/v1/teams/")

        assert response.json() == []


class TestTypeahead:
    def test_owner_can_search(self, qa_world, client_for):
        store = qa_world["store"]
        client = client_for(qa_world["owner"])
        url = f"/api/v1/teams/{qa_world['team'].id}/typeahead"

        first = client.get(url, params={"query": "user"})
        user1 = store.add_user("user1")
        store.add_user("user2")
        store.add_membership(qa_world["team"], user1, TeamRole.VIEWER)
        second = client.get(url, params={"query": "user"})

        assert first.status_code == 200
        assert first.json() == []
        assert second.json() == [{"name": "user2"}]

    @pytest.mark.parametrize("role", [TeamRole.VIEWER, TeamRole.CONTRIBUTOR])
    def test_contributors_and_viewers_denied(self, qa_world, client_for, role):
        store = qa_world["store"]
        member = store.add_user(f"member-{role.value}")
        store.add_membership(qa_world["team"], member, role)

        response = client_for(member).get(
            f"/api/v1/teams/{qa_world['team'].id}/typeahead", params={"query": "user"}
        )

        assert response.status_code == 403

    def test_hidden_team_not_found(self, qa_world, client_for):
        response = client_for(qa_world["owner"]).get(
            f"/api/v1/teams/{qa_world['hidden'].id}/typeahead", params={"query": "user"}
        )

        assert response.status_code == 404


class TestSearchTeams:
    def test_unmaterialized_team_then_member(self, qa_world, client_for):
        store = qa_world["store"]
        late = store.add_team("late team")
        client = client_for(qa_world["owner"])

        empty = client.get("/api/v1/teams/search", params={"query": "late"})
        store.add_membership(late, qa_world["owner"], TeamRole.VIEWER)
        found = client.get("/api/v1/teams/search", params={"query": "late"})

        assert empty.json() == []
        assert [t["name"] for t in found.json()] == ["late team"]

    def test_hidden_team_never_listed(self, qa_world, client_for):
        response = client_for(qa_world["owner"]).get("/api/v1/teams/search", params={"query": "team"})

        assert [t["name"] for t in response.json()] == ["qa team"]


class TestDirectCalls:
    def test_read_team_maps_denial(self, qa_world, service):
        from teamscope.api.v1.endpoints.teams import read_team

        stranger = qa_world["store"].add_user("stranger")

        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(read_team(team_id=qa_world["team"].id, current_user=stranger, service=service))

        assert exc_info.value.status_code == 403

    def test_typeahead_maps_not_found(self, qa_world, service):
        from teamscope.api.v1.endpoints.teams import typeahead

        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(
                typeahead(
                    team_id="missing",
                    query="user",
                    limit=None,
                    current_user=qa_world["owner"],
                    service=service,
                )
            )

        assert exc_info.value.status_code == 404
