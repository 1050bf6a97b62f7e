"""
Shared Constants

Centralized constants used across the application to ensure consistency.
"""

from typing import List

# Team roles, ordered from least to most privileged
TEAM_ROLE_VIEWER = "viewer"
TEAM_ROLE_CONTRIBUTOR = "contributor"
TEAM_ROLE_OWNER = "owner"

TEAM_ROLES: List[str] = [
    TEAM_ROLE_VIEWER,
    TEAM_ROLE_CONTRIBUTOR,
    TEAM_ROLE_OWNER,
]

# Search match modes
MATCH_MODE_SUBSTRING = "substring"
MATCH_MODE_PREFIX = "prefix"

MATCH_MODES: List[str] = [MATCH_MODE_SUBSTRING, MATCH_MODE_PREFIX]

# Collection names
TEAMS_COLLECTION = "teams"
MEMBERSHIPS_COLLECTION = "team_memberships"
USERS_COLLECTION = "users"

# Reasons carried by TeamAccessDenied
DENIAL_NOT_A_MEMBER = "not_a_member"
DENIAL_INSUFFICIENT_ROLE = "insufficient_role"
