import pytest

from landing.auth.password import PasswordHasher
from landing.database import Store
from landing.repositories.respondent_repository import RespondentRepository
from landing.repositories.user_repository import UserRepository


@pytest.fixture
def store():
    store = Store('sqlite://')
    store.create_schema()
    try:
        yield store
    finally:
        store.dispose()


@pytest.fixture
def hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast.
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repository(store, hasher) -> UserRepository:
    return UserRepository(store, hasher=hasher)


@pytest.fixture
def respondent_repository(store) -> RespondentRepository:
    return RespondentRepository(store)
