import pytest
from sqlalchemy.exc import OperationalError

from landing.core import config
from landing.core.errors import ConflictError, NotFoundError, StoreFailureError
from landing.database import Base
from landing.models.user import User


def test_create_user_hashes_password_and_defaults_status(user_repository) -> None:
    user = user_repository.create('admin@example.com', 'hunter22')

    assert user.id is not None
    assert user.email == 'admin@example.com'
    assert user.password != 'hunter22'
    assert user.status == config.DEFAULT_USER_STATUS == 'active'


def test_create_user_accepts_explicit_status(user_repository) -> None:
    user = user_repository.create('new@example.com', 'hunter22', status='new')

    assert user.status == 'new'


def test_create_user_rejects_duplicate_email(user_repository) -> None:
    user_repository.create('admin@example.com', 'hunter22')

    with pytest.raises(ConflictError) as exception_info:
        user_repository.create('admin@example.com', 'other-password')

    assert exception_info.value.message == 'Failed to create user.'


def test_verify_login_returns_user_for_matching_credentials(user_repository) -> None:
    created = user_repository.create('admin@example.com', 'hunter22')

    user = user_repository.verify_login('admin@example.com', 'hunter22')

    assert user is not None
    assert user.id == created.id
    assert user.email == 'admin@example.com'


def test_verify_login_returns_none_for_wrong_password(user_repository) -> None:
    user_repository.create('admin@example.com', 'hunter22')

    assert user_repository.verify_login('admin@example.com', 'wrong') is None


def test_verify_login_spends_a_hash_check_for_unknown_email(user_repository, monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(user_repository.hasher, 'dummy_verify', lambda plaintext: calls.append(plaintext))

    assert user_repository.verify_login('nobody@example.com', 'hunter22') is None
    assert calls == ['hunter22']


def test_verify_login_returns_none_for_malformed_stored_hash(user_repository, store) -> None:
    created = user_repository.create('admin@example.com', 'hunter22')
    with store.session() as db:
        db.get(User, created.id).password = 'hunter22'
        db.commit()

    assert user_repository.verify_login('admin@example.com', 'hunter22') is None


def test_get_by_id_and_email_return_created_user(user_repository) -> None:
    created = user_repository.create('admin@example.com', 'hunter22')

    assert user_repository.get_by_id(created.id).email == 'admin@example.com'
    assert user_repository.get_by_email('admin@example.com').id == created.id


def test_get_by_email_returns_none_when_missing(user_repository) -> None:
    assert user_repository.get_by_email('nobody@example.com') is None


def test_get_by_id_raises_not_found_when_missing(user_repository) -> None:
    with pytest.raises(NotFoundError) as exception_info:
        user_repository.get_by_id(999)

    assert exception_info.value.message == 'Failed to retrieve user.'


def test_update_status_persists_new_status(user_repository) -> None:
    created = user_repository.create('new@example.com', 'hunter22', status='new')

    updated = user_repository.update_status(created.id, 'active')

    assert updated.status == 'active'
    assert user_repository.get_by_id(created.id).status == 'active'


def test_update_status_raises_not_found_for_unknown_id(user_repository) -> None:
    with pytest.raises(NotFoundError) as exception_info:
        user_repository.update_status(999, 'active')

    assert exception_info.value.message == 'Failed to update user status.'


def test_delete_then_get_by_id_raises_not_found(user_repository) -> None:
    created = user_repository.create('admin@example.com', 'hunter22')

    deleted = user_repository.delete(created.id)

    assert deleted.id == created.id
    assert deleted.email == 'admin@example.com'
    with pytest.raises(NotFoundError):
        user_repository.get_by_id(created.id)


def test_delete_raises_not_found_for_unknown_id(user_repository) -> None:
    with pytest.raises(NotFoundError) as exception_info:
        user_repository.delete(999)

    assert exception_info.value.message == 'Failed to delete user.'


@pytest.mark.parametrize(
    ('operation', 'message'),
    [
        (lambda repository: repository.create('admin@example.com', 'hunter22'), 'Failed to create user.'),
        (lambda repository: repository.get_by_id(1), 'Failed to retrieve user.'),
        (lambda repository: repository.get_by_email('admin@example.com'), 'Failed to retrieve user.'),
        (lambda repository: repository.update_status(1, 'active'), 'Failed to update user status.'),
        (lambda repository: repository.delete(1), 'Failed to delete user.'),
        (lambda repository: repository.verify_login('admin@example.com', 'hunter22'), 'Failed to verify login.'),
    ],
)
def test_store_failures_surface_as_store_failure_with_cause(user_repository, store, operation, message) -> None:
    Base.metadata.drop_all(bind=store.engine)

    with pytest.raises(StoreFailureError) as exception_info:
        operation(user_repository)

    assert exception_info.value.message == message
    assert isinstance(exception_info.value.__cause__, OperationalError)


@pytest.mark.parametrize('email', ['admin@example.com', 'nobody@example.com'])
def test_verify_login_returns_none_for_overlong_password(user_repository, email) -> None:
    user_repository.create('admin@example.com', 'hunter22')

    assert user_repository.verify_login(email, 'x' * 100) is None


def test_create_stores_normalized_email(user_repository) -> None:
    user = user_repository.create(' Admin@Example.com ', 'hunter22')

    assert user.email == 'admin@example.com'
    assert user_repository.get_by_email('ADMIN@example.com').id == user.id
    assert user_repository.verify_login('Admin@Example.com', 'hunter22').id == user.id


def test_create_rejects_email_differing_only_in_case(user_repository) -> None:
    user_repository.create('admin@example.com', 'hunter22')

    with pytest.raises(ConflictError):
        user_repository.create('Admin@Example.com', 'hunter22')
