"""Common models package."""

from users_common.models.results import NotFound, Ok, ValidationFailed
from users_common.models.user import User, UserInput

__all__ = [
    "NotFound",
    "Ok",
    "User",
    "UserInput",
    "ValidationFailed",
]
