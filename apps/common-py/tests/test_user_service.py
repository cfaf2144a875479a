"""Tests for the user service."""

import threading

import pytest
from pydantic import ValidationError
from users_common.models.results import NotFound, Ok, ValidationFailed
from users_common.models.user import User, UserInput
from users_common.services.user_service import UserService
from users_common.services.user_store import InMemoryUserStore


@pytest.fixture(name="service")
def _service() -> UserService:
    """Create a service over an empty store."""
    return UserService(InMemoryUserStore())


def _create(service: UserService, name: str, email: str) -> User:
    outcome = service.create(UserInput(name=name, email=email))
    assert isinstance(outcome, Ok)
    return outcome.value


@pytest.mark.unit
def test_create_assigns_sequential_ids(service: UserService) -> None:
    ids = [_create(service, f"User {i}", f"user{i}@example.com").id for i in range(5)]

    assert ids == [1, 2, 3, 4, 5]


@pytest.mark.unit
def test_create_ignores_supplied_id(service: UserService) -> None:
    outcome = service.create(UserInput(id=99, name="Alice", email="alice@example.com"))

    assert outcome == Ok(User(id=1, name="Alice", email="alice@example.com"))


@pytest.mark.unit
def test_create_then_get_returns_same_data(service: UserService) -> None:
    created = _create(service, "Alice", "alice@example.com")

    outcome = service.get_by_id(created.id)
    assert isinstance(outcome, Ok)
    assert outcome.value.name == "Alice"
    assert outcome.value.email == "alice@example.com"
    assert created.id > 0


@pytest.mark.unit
def test_create_with_empty_name_fails(service: UserService) -> None:
    outcome = service.create(UserInput(name="", email="not-an-email"))

    assert outcome == ValidationFailed("Name cannot be empty.")
    assert service.list_all() == []


@pytest.mark.unit
def test_create_with_bad_email_fails(service: UserService) -> None:
    outcome = service.create(UserInput(name="Alice", email="not-an-email"))

    assert outcome == ValidationFailed("Invalid email format.")
    assert service.list_all() == []


@pytest.mark.unit
def test_ids_are_recomputed_after_deleting_highest(service: UserService) -> None:
    for i in range(3):
        _create(service, f"User {i}", f"user{i}@example.com")

    assert service.delete(3) == Ok(None)
    assert _create(service, "Dave", "dave@example.com").id == 3

    assert service.delete(1) == Ok(None)
    assert _create(service, "Erin", "erin@example.com").id == 4


@pytest.mark.unit
def test_get_missing_user(service: UserService) -> None:
    assert service.get_by_id(1) == NotFound(1)


@pytest.mark.unit
def test_update_missing_user(service: UserService) -> None:
    outcome = service.update(999, UserInput(name="Alice", email="alice@example.com"))

    assert outcome == NotFound(999)


@pytest.mark.unit
def test_update_missing_user_reports_not_found_before_validation(service: UserService) -> None:
    assert service.update(999, UserInput(name="", email="")) == NotFound(999)


@pytest.mark.unit
def test_update_invalid_leaves_user_untouched(service: UserService) -> None:
    created = _create(service, "Alice", "alice@example.com")

    outcome = service.update(created.id, UserInput(name="Alice", email=""))

    assert outcome == ValidationFailed("Email cannot be empty.")
    assert service.get_by_id(created.id) == Ok(created)


@pytest.mark.unit
def test_update_overwrites_name_and_email_only(service: UserService) -> None:
    created = _create(service, "Alice", "alice@example.com")

    outcome = service.update(created.id, UserInput(id=50, name="Alicia", email="alicia@example.com"))

    assert outcome == Ok(User(id=created.id, name="Alicia", email="alicia@example.com"))
    assert service.get_by_id(created.id) == outcome


@pytest.mark.unit
def test_list_order_unaffected_by_updates(service: UserService) -> None:
    for name in ("Alice", "Bob", "Carol"):
        _create(service, name, f"{name.lower()}@example.com")

    service.update(1, UserInput(name="Alicia", email="alicia@example.com"))
    service.update(2, UserInput(name="Robert", email="robert@example.com"))

    assert [(user.id, user.name) for user in service.list_all()] == [
        (1, "Alicia"),
        (2, "Robert"),
        (3, "Carol"),
    ]


@pytest.mark.unit
def test_delete_then_get_is_not_found(service: UserService) -> None:
    created = _create(service, "Alice", "alice@example.com")

    assert service.delete(created.id) == Ok(None)
    assert service.get_by_id(created.id) == NotFound(created.id)
    assert service.delete(created.id) == NotFound(created.id)


@pytest.mark.unit
def test_concurrent_creates_get_unique_ids(service: UserService) -> None:
    def worker(offset: int) -> None:
        for i in range(50):
            _create(service, f"User {offset}-{i}", f"user{offset}.{i}@example.com")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [user.id for user in service.list_all()]
    assert sorted(ids) == list(range(1, 201))
    assert ids == sorted(ids)


@pytest.mark.unit
def test_reads_unaffected_by_concurrent_deletes(service: UserService) -> None:
    for i in range(200):
        _create(service, f"User {i}", f"user{i}@example.com")
    target = 150
    stop = threading.Event()

    def churn() -> None:
        while not stop.is_set():
            victim = next(user for user in service.list_all() if user.id != target)
            service.delete(victim.id)
            _create(service, "Churn", "churn@example.com")

    thread = threading.Thread(target=churn)
    thread.start()
    try:
        misses = sum(1 for _ in range(50_000) if isinstance(service.get_by_id(target), NotFound))
    finally:
        stop.set()
        thread.join()

    assert misses == 0


@pytest.mark.unit
def test_returned_users_cannot_be_mutated(service: UserService) -> None:
    created = _create(service, "Alice", "alice@example.com")

    with pytest.raises(ValidationError):
        created.name = ""

    assert service.get_by_id(created.id) == Ok(User(id=1, name="Alice", email="alice@example.com"))
