"""
Shared test fixtures and configuration.

Environment variables are set BEFORE any package imports to prevent
accidental connections to real databases.
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Override settings before any package code imports the settings singleton
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "15"
os.environ["MONGODB_URL"] = "mongodb://localhost:27017"
os.environ["DATABASE_NAME"] = "test_teamscope"
os.environ["DIRECTORY_SEARCH_MIN_ROLE"] = "owner"
os.environ["SEARCH_MATCH_MODE"] = "substring"

import pytest  # noqa: E402

from teamscope.core.roles import TeamRole  # noqa: E402
from tests.mocks.store import InMemoryMembershipStore  # noqa: E402


@pytest.fixture
def store():
    """Empty in-memory membership store."""
    return InMemoryMembershipStore()


@pytest.fixture
def qa_world(store):
    """
    The reference scenario: team "qa team" owned by `owner`, plus the hidden
    global team (also owned by `owner`) and the admin user that bootstrap
    creates alongside a registry.
    """
    owner = store.add_user("owner")
    admin = store.add_user("admin")
    team = store.add_team("qa team", description="short test description")
    hidden = store.add_team("portus_global_team_1", hidden=True)
    store.add_membership(team, owner, TeamRole.OWNER)
    store.add_membership(hidden, owner, TeamRole.OWNER)
    return {
        "store": store,
        "owner": owner,
        "admin": admin,
        "team": team,
        "hidden": hidden,
    }
