"""
Result values and errors of the access-control engine.

`resolve` returns one of Visible / Forbidden / NotFound as a plain value.
Every other operation raises an AccessControlError subclass instead, which
the API layer maps to 404 / 403.
"""

from dataclasses import dataclass
from typing import Optional, Union

from teamscope.core.constants import DENIAL_INSUFFICIENT_ROLE, DENIAL_NOT_A_MEMBER
from teamscope.core.roles import TeamRole
from teamscope.models.membership import Membership
from teamscope.models.team import Team


@dataclass(frozen=True)
class Visible:
    team: Team
    membership: Membership

    @property
    def role(self) -> TeamRole:
        return self.membership.role


@dataclass(frozen=True)
class Forbidden:
    team_id: str


@dataclass(frozen=True)
class NotFound:
    team_id: str


Resolution = Union[Visible, Forbidden, NotFound]


class AccessControlError(Exception):
    """Base class for failures originating in the access-control engine."""


class TeamNotFoundError(AccessControlError):
    """The team does not exist, or is the hidden sentinel team."""

    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(f"Team {team_id} not found")


class TeamAccessDenied(AccessControlError):
    """
    The team is addressable but the requester may not perform the action.

    `reason` is either "not_a_member" or "insufficient_role". Callers present
    both the same way.
    """

    def __init__(
        self,
        team_id: str,
        reason: str,
        role: Optional[TeamRole] = None,
        required: Optional[TeamRole] = None,
    ):
        self.team_id = team_id
        self.reason = reason
        self.role = role
        self.required = required
        super().__init__(f"Access to team {team_id} denied: {reason}")

    @classmethod
    def not_a_member(cls, team_id: str) -> "TeamAccessDenied":
        return cls(team_id, DENIAL_NOT_A_MEMBER)

    @classmethod
    def insufficient_role(cls, team_id: str, role: TeamRole, required: TeamRole) -> "TeamAccessDenied":
        return cls(team_id, DENIAL_INSUFFICIENT_ROLE, role=role, required=required)
