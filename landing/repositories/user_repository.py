"""Data access for administrator accounts."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from landing.auth.password import PasswordHasher
from landing.core import config
from landing.core.errors import ConflictError, NotFoundError, StoreFailureError
from landing.database import Store
from landing.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository:
    """CRUD operations on the users table plus login verification."""

    def __init__(self, store: Store, hasher: PasswordHasher | None = None) -> None:
        self.store = store
        self.hasher = hasher or PasswordHasher()

    def create(self, email: str, password: str, status: str | None = None) -> User:
        email = normalize_email(email)
        user = User(
            email=email,
            password=self.hasher.hash(password),
            status=status or config.DEFAULT_USER_STATUS,
        )
        try:
            with self.store.session() as db:
                db.add(user)
                db.commit()
                db.refresh(user)
        except IntegrityError as exc:
            logger.warning('User creation rejected for %s: %s', email, exc.orig)
            raise ConflictError('Failed to create user.') from exc
        except SQLAlchemyError as exc:
            logger.exception('Error creating user.')
            raise StoreFailureError('Failed to create user.') from exc
        return user

    def get_by_id(self, user_id: int) -> User:
        try:
            with self.store.session() as db:
                user = db.get(User, user_id)
        except SQLAlchemyError as exc:
            logger.exception('Error retrieving user by ID %s.', user_id)
            raise StoreFailureError('Failed to retrieve user.') from exc
        if user is None:
            raise NotFoundError('Failed to retrieve user.')
        return user

    def get_by_email(self, email: str) -> User | None:
        try:
            with self.store.session() as db:
                return db.query(User).filter(User.email == normalize_email(email)).first()
        except SQLAlchemyError as exc:
            logger.exception('Error retrieving user by email.')
            raise StoreFailureError('Failed to retrieve user.') from exc

    def update_status(self, user_id: int, status: str) -> User:
        try:
            with self.store.session() as db:
                user = db.get(User, user_id)
                if user is None:
                    raise NotFoundError('Failed to update user status.')
                user.status = status
                db.commit()
                db.refresh(user)
        except SQLAlchemyError as exc:
            logger.exception('Error updating status of user %s.', user_id)
            raise StoreFailureError('Failed to update user status.') from exc
        return user

    def delete(self, user_id: int) -> User:
        try:
            with self.store.session() as db:
                user = db.get(User, user_id)
                if user is None:
                    raise NotFoundError('Failed to delete user.')
                db.delete(user)
                db.commit()
        except SQLAlchemyError as exc:
            logger.exception('Error deleting user %s.', user_id)
            raise StoreFailureError('Failed to delete user.') from exc
        return user

    def verify_login(self, email: str, password: str) -> User | None:
        """Return the user when the credentials match, otherwise None.

        An unknown email and a wrong password are indistinguishable to the
        caller, and both paths run one bcrypt check.
        """
        try:
            with self.store.session() as db:
                user = db.query(User).filter(User.email == normalize_email(email)).first()
        except SQLAlchemyError as exc:
            logger.exception('Error during login verification.')
            raise StoreFailureError('Failed to verify login.') from exc

        if user is None:
            self.hasher.dummy_verify(password)
            return None
        if not self.hasher.verify(password, user.password):
            return None
        return user
