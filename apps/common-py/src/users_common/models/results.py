"""Result variants returned by user service operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Operation succeeded."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """The referenced user id does not exist."""

    user_id: int


@dataclass(frozen=True)
class ValidationFailed:
    """The candidate failed a validation rule."""

    reason: str
