"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import Iterator

import pytest

# Ensure both src directories are on sys.path for absolute imports
_TESTS_DIR = os.path.dirname(__file__)
for _src in (
    os.path.join(_TESTS_DIR, "..", "src"),
    os.path.join(_TESTS_DIR, "..", "..", "common-py", "src"),
):
    _src_path = os.path.abspath(_src)
    if _src_path not in sys.path:
        sys.path.insert(0, _src_path)

from fastapi.testclient import TestClient  # noqa: E402
from users_api.main import app  # noqa: E402
from users_api.services import build_user_service, get_user_service  # noqa: E402
from users_common.services.user_service import UserService  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")


@pytest.fixture
def user_service() -> UserService:
    """Create a user service over an empty store."""
    return build_user_service(seed_users=False)


@pytest.fixture
def client(user_service: UserService) -> Iterator[TestClient]:
    """Create a FastAPI test client bound to a fresh user service."""
    app.dependency_overrides[get_user_service] = lambda: user_service
    yield TestClient(app)
    app.dependency_overrides.pop(get_user_service, None)
