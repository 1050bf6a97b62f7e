"""
Team Role Hierarchy

Closed, totally ordered set of team roles: viewer < contributor < owner.
There is no dynamic role registration; anything outside this enum is invalid.
"""

from enum import Enum
from typing import Union

from teamscope.core.constants import (
    TEAM_ROLE_CONTRIBUTOR,
    TEAM_ROLE_OWNER,
    TEAM_ROLE_VIEWER,
    TEAM_ROLES,
)


class TeamRole(str, Enum):
    VIEWER = TEAM_ROLE_VIEWER
    CONTRIBUTOR = TEAM_ROLE_CONTRIBUTOR
    OWNER = TEAM_ROLE_OWNER

    @property
    def level(self) -> int:
        """Position in the hierarchy (viewer=0, contributor=1, owner=2)."""
        return TEAM_ROLES.index(self.value)

    @classmethod
    def parse(cls, value: Union[str, "TeamRole"]) -> "TeamRole":
        """
        Convert a stored role name into a TeamRole.

        Raises:
            ValueError: if the name is not one of the known roles
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown team role '{value}'. Expected one of: {', '.join(TEAM_ROLES)}"
            ) from None


def meets(actual: Union[str, TeamRole], minimum: Union[str, TeamRole]) -> bool:
    """Return True iff `actual` is at least as privileged as `minimum`."""
    return TeamRole.parse(actual).level >= TeamRole.parse(minimum).level
