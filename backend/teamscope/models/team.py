import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from teamscope.models.types import PyObjectId


class Team(BaseModel):
    id: PyObjectId = Field(default_factory=lambda: str(uuid.uuid4()), alias="_id")
    name: str
    description: Optional[str] = None
    # Exactly one team carries this flag: the global sentinel team
    hidden: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Team name must not be empty")
        return v

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True
