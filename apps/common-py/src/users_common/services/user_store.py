"""User store with in-memory implementation."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from users_common.models.user import User

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract interface for the ordered collection of user records."""

    @abstractmethod
    def list(self) -> list[User]:
        """List all users in insertion order."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Find a user by ID."""
        pass

    @abstractmethod
    def next_id(self) -> int:
        """Compute the ID for the next appended user."""
        pass

    @abstractmethod
    def append(self, user: User) -> None:
        """Append a user to the end of the collection."""
        pass

    @abstractmethod
    def replace(self, user: User) -> None:
        """Replace the user sharing ``user.id``, keeping its position."""
        pass

    @abstractmethod
    def remove(self, user: User) -> None:
        """Remove a user."""
        pass


class InMemoryUserStore(UserStore):
    """In-memory implementation of UserStore.

    Records are held in a list so that listing preserves insertion order.
    No validation happens here; callers are expected to validate before
    writing.
    """

    def __init__(self, users: Iterable[User] | None = None) -> None:
        """Initialize the store.

        Args:
            users: Optional initial records, appended in order

        Raises:
            ValueError: If two initial records share an ID
        """
        self._users: list[User] = []
        for user in users or []:
            self.append(user)

    def __len__(self) -> int:
        return len(self._users)

    def list(self) -> list[User]:
        """List all users in insertion order.

        Returns:
            A copy of the current sequence
        """
        return list(self._users)

    def find_by_id(self, user_id: int) -> User | None:
        """Find a user by ID.

        Args:
            user_id: User ID

        Returns:
            The matching user or None
        """
        # Iterate a snapshot; a concurrent delete shifts the live list
        for user in list(self._users):
            if user.id == user_id:
                return user
        return None

    def next_id(self) -> int:
        """Compute the ID for the next appended user.

        Recomputed on every call because deletions can lower the maximum.

        Returns:
            1 when empty, otherwise the highest current ID plus one
        """
        if not self._users:
            return 1
        return max(user.id for user in self._users) + 1

    def append(self, user: User) -> None:
        """Append a user to the end of the collection.

        Args:
            user: User to append

        Raises:
            ValueError: If a user with the same ID is already stored
        """
        if self.find_by_id(user.id) is not None:
            raise ValueError(f"User with id {user.id} already exists")
        self._users.append(user)

    def replace(self, user: User) -> None:
        """Replace the user sharing ``user.id``, keeping its position.

        Args:
            user: New version of the record

        Raises:
            KeyError: If no user with that ID is stored
        """
        self._users[self._index_of(user.id)] = user

    def remove(self, user: User) -> None:
        """Remove a user.

        Args:
            user: User to remove

        Raises:
            KeyError: If no user with that ID is stored
        """
        del self._users[self._index_of(user.id)]

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise KeyError(user_id)
