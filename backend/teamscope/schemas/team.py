from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from teamscope.core.roles import TeamRole


class TeamMemberSchema(BaseModel):
    user_id: str
    username: str
    role: TeamRole


class TeamBase(BaseModel):
    name: str
    description: Optional[str] = None


class TeamSummary(TeamBase):
    id: str = Field(..., alias="_id")
    created_at: datetime
    updated_at: datetime

    class Config:
        populate_by_name = True


class TeamResponse(TeamSummary):
    role: TeamRole
    members: List[TeamMemberSchema]


class TypeaheadUser(BaseModel):
    name: str
