import logging

import pymongo
from pymongo.errors import DuplicateKeyError

from teamscope.core.config import settings
from teamscope.core.constants import (
    MEMBERSHIPS_COLLECTION,
    TEAMS_COLLECTION,
    USERS_COLLECTION,
)
from teamscope.db.mongodb import get_database
from teamscope.models.team import Team
from teamscope.repositories import TeamRepository

logger = logging.getLogger(__name__)


async def create_indexes(db):
    """Creates indexes for all collections to ensure performance and uniqueness."""
    logger.info("Creating database indexes...")

    # Users
    await db[USERS_COLLECTION].create_index("username", unique=True)
    await db[USERS_COLLECTION].create_index("enabled")

    # Teams
    await db[TEAMS_COLLECTION].create_index("name", unique=True)
    await db[TEAMS_COLLECTION].create_index("hidden")

    # Memberships: a user holds at most one role per team
    await db[MEMBERSHIPS_COLLECTION].create_index(
        [("team_id", pymongo.ASCENDING), ("user_id", pymongo.ASCENDING)],
        unique=True,
    )
    await db[MEMBERSHIPS_COLLECTION].create_index("user_id")

    logger.info("Database indexes created successfully.")


async def ensure_hidden_team(db) -> Team:
    """Create the global hidden team once. Safe to call on every startup."""
    team_repo = TeamRepository(db)

    existing = await team_repo.get_hidden()
    if existing:
        logger.info(f"Hidden team '{existing.name}' already exists.")
        return existing

    team = Team(
        name=settings.HIDDEN_TEAM_NAME,
        description="Global team for system-wide defaults",
        hidden=True,
    )
    try:
        await team_repo.create(team)
        logger.info(f"Created hidden team '{team.name}'.")
        return team
    except DuplicateKeyError as exc:
        # Either another instance won the race or a regular team holds the name
        existing = await team_repo.get_hidden()
        if existing is None:
            logger.error(
                f"Cannot create hidden team: the name '{team.name}' is taken by a regular team."
            )
            raise RuntimeError(
                f"Team name '{team.name}' is already used by a team that is not hidden"
            ) from exc
        logger.info("Hidden team was created concurrently, reusing it.")
        return existing


async def init_db():
    db = await get_database()

    await create_indexes(db)
    await ensure_hidden_team(db)
