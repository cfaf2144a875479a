"""Validation rules for user input."""

import re

from users_common.models.user import UserInput

# Deliberately shallow; accepts addresses such as "a@b..c".
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

NAME_REQUIRED = "Name cannot be empty."
EMAIL_REQUIRED = "Email cannot be empty."
EMAIL_INVALID = "Invalid email format."


def validate_user(candidate: UserInput) -> str | None:
    """Validate a candidate user.

    Rules are checked in order and the first failure wins, so a missing
    name is reported before any problem with the email.

    Args:
        candidate: User data supplied by the caller

    Returns:
        The reason of the first violated rule, or None if the candidate is valid
    """
    if not candidate.name:
        return NAME_REQUIRED

    if not candidate.email:
        return EMAIL_REQUIRED

    if not EMAIL_PATTERN.match(candidate.email):
        return EMAIL_INVALID

    return None
