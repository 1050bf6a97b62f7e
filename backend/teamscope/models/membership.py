import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from teamscope.core.roles import TeamRole
from teamscope.models.types import PyObjectId


class Membership(BaseModel):
    """Join record between a team and a user. Unique per (team_id, user_id)."""

    id: PyObjectId = Field(default_factory=lambda: str(uuid.uuid4()), alias="_id")
    team_id: str
    user_id: str
    role: TeamRole = TeamRole.VIEWER
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, v):
        return TeamRole.parse(v)

    class Config:
        populate_by_name = True
