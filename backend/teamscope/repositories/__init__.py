"""
Repository Pattern for Database Access

Provides a clean abstraction layer over MongoDB collections,
centralizing database operations and reducing code duplication.
"""

from teamscope.repositories.base import BaseRepository
from teamscope.repositories.memberships import MembershipRepository
from teamscope.repositories.teams import TeamRepository
from teamscope.repositories.users import UserRepository

__all__ = [
    "BaseRepository",
    "MembershipRepository",
    "TeamRepository",
    "UserRepository",
]
