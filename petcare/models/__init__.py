from petcare.models.enums import Role, SchedulingType
from petcare.models.refresh_token import RefreshToken
from petcare.models.scheduling import Scheduling
from petcare.models.user import Person, User

__all__ = [
    "Person",
    "RefreshToken",
    "Role",
    "Scheduling",
    "SchedulingType",
    "User",
]
