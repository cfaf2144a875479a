"""Service initialization and dependency injection."""

import logging

from fastapi import Request
from users_common.models.user import User
from users_common.services.user_service import UserService
from users_common.services.user_store import InMemoryUserStore

logger = logging.getLogger(__name__)

SEED_USERS = (
    User(id=1, name="Alice", email="alice@example.com"),
    User(id=2, name="Bob", email="bob@example.com"),
)


def build_user_service(seed_users: bool = True) -> UserService:
    """Build a user service over a fresh in-memory store.

    Args:
        seed_users: Whether to start the store with the sample users

    Returns:
        UserService instance
    """
    store = InMemoryUserStore(SEED_USERS if seed_users else None)
    logger.info("Initialized UserService (seed_users=%s)", seed_users)
    return UserService(store)


def get_user_service(request: Request) -> UserService:
    """Get the user service owned by the serving application.

    Args:
        request: Incoming request

    Returns:
        UserService instance built by ``create_app``
    """
    return request.app.state.user_service
