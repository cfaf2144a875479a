"""User service orchestrating validation and store mutations."""

import logging
import threading

from users_common.models.results import NotFound, Ok, ValidationFailed
from users_common.models.user import User, UserInput
from users_common.services.user_store import UserStore
from users_common.services.validation import validate_user

logger = logging.getLogger(__name__)


class UserService:
    """Service for managing users over a UserStore.

    Create, update and delete run under a single lock, so the lookup, ID
    assignment and mutation of one call never interleave with another.
    Reads go straight to the store: it scans and hands out copies of its
    sequence, and records are frozen and replaced whole on update, so readers
    never see a partial write.
    """

    def __init__(self, store: UserStore) -> None:
        """Initialize the service.

        Args:
            store: Store holding the user records
        """
        self.store = store
        self._lock = threading.Lock()

    def list_all(self) -> list[User]:
        """List all users in creation order."""
        return self.store.list()

    def get_by_id(self, user_id: int) -> Ok[User] | NotFound:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            Ok with the user, or NotFound
        """
        user = self.store.find_by_id(user_id)
        if user is None:
            return NotFound(user_id)
        return Ok(user)

    def create(self, candidate: UserInput) -> Ok[User] | ValidationFailed:
        """Create a user from a validated candidate.

        Args:
            candidate: User data; any ID it carries is ignored

        Returns:
            Ok with the stored user, or ValidationFailed with the first violated rule
        """
        reason = validate_user(candidate)
        if reason is not None:
            logger.warning("Rejected new user: %s", reason)
            return ValidationFailed(reason)

        with self._lock:
            user = User(id=self.store.next_id(), name=candidate.name, email=candidate.email)
            self.store.append(user)

        logger.info("Created user %s", user.id)
        return Ok(user)

    def update(self, user_id: int, candidate: UserInput) -> Ok[User] | NotFound | ValidationFailed:
        """Overwrite the name and email of an existing user.

        The user keeps its ID and its position in the listing.

        Args:
            user_id: User ID
            candidate: New user data; any ID it carries is ignored

        Returns:
            Ok with the updated user, NotFound, or ValidationFailed
        """
        with self._lock:
            existing = self.store.find_by_id(user_id)
            if existing is None:
                return NotFound(user_id)

            reason = validate_user(candidate)
            if reason is not None:
                logger.warning("Rejected update of user %s: %s", user_id, reason)
                return ValidationFailed(reason)

            user = existing.model_copy(update={"name": candidate.name, "email": candidate.email})
            self.store.replace(user)

        logger.info("Updated user %s", user_id)
        return Ok(user)

    def delete(self, user_id: int) -> Ok[None] | NotFound:
        """Delete a user.

        Args:
            user_id: User ID

        Returns:
            Ok, or NotFound
        """
        with self._lock:
            existing = self.store.find_by_id(user_id)
            if existing is None:
                return NotFound(user_id)
            self.store.remove(existing)

        logger.info("Deleted user %s", user_id)
        return Ok(None)
