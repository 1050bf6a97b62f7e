"""
Team access-control engine.
"""

from teamscope.services.access.service import TeamAccessService, is_addressable
from teamscope.services.access.store import MembershipStore, MongoMembershipStore
from teamscope.services.access.types import (
    AccessControlError,
    Forbidden,
    NotFound,
    Resolution,
    TeamAccessDenied,
    TeamNotFoundError,
    Visible,
)

__all__ = [
    "TeamAccessService",
    "is_addressable",
    "MembershipStore",
    "MongoMembershipStore",
    "AccessControlError",
    "Forbidden",
    "NotFound",
    "Resolution",
    "TeamAccessDenied",
    "TeamNotFoundError",
    "Visible",
]
