from teamscope.models.membership import Membership
from teamscope.models.team import Team
from teamscope.models.user import User

__all__ = ["Membership", "Team", "User"]
