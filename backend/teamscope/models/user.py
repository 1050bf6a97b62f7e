import uuid
from typing import Optional

from pydantic import BaseModel, Field

from teamscope.models.types import PyObjectId


class User(BaseModel):
    id: PyObjectId = Field(default_factory=lambda: str(uuid.uuid4()), alias="_id")
    username: str
    email: Optional[str] = None
    # Disabled users stay in the store but are hidden from other users' views
    enabled: bool = True

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True
