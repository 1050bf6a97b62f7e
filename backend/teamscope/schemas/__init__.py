from teamscope.schemas.team import (
    TeamMemberSchema,
    TeamResponse,
    TeamSummary,
    TypeaheadUser,
)

__all__ = [
    "TeamMemberSchema",
    "TeamResponse",
    "TeamSummary",
    "TypeaheadUser",
]
