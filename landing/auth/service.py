import logging

import jwt

from landing.auth import jwt_handler
from landing.core import config
from landing.core.errors import InvalidCredentialsError, NotFoundError
from landing.models.user import User
from landing.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Issues and checks access tokens for the admin listing page."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    def login(self, email: str, password: str) -> str:
        user = self.users.verify_login(email, password)
        if user is None or user.status != config.USER_STATUS_ACTIVE:
            logger.info('Rejected admin login attempt.')
            raise InvalidCredentialsError('Invalid email or password.')
        return jwt_handler.create_access_token(user_id=user.id, email=user.email)

    def current_user(self, token: str) -> User:
        try:
            payload = jwt_handler.decode_access_token(token)
        except jwt.PyJWTError as exc:
            raise InvalidCredentialsError('Invalid token.') from exc

        try:
            user = self.users.get_by_id(payload['uid'])
        except NotFoundError as exc:
            raise InvalidCredentialsError('Invalid token.') from exc
        if user.email != payload['sub'] or user.status != config.USER_STATUS_ACTIVE:
            raise InvalidCredentialsError('Invalid token.')
        return user
