import logging

import bcrypt

from landing.core import config


logger = logging.getLogger(__name__)

# bcrypt only looks at this many bytes of input; newer releases reject more.
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing for stored passwords."""

    def __init__(self, rounds: int | None = None) -> None:
        self.rounds = rounds or config.BCRYPT_ROUNDS
        self._dummy_hash = bcrypt.hashpw(b'unused-password', bcrypt.gensalt(rounds=self.rounds))

    def hash(self, plaintext: str) -> str:
        candidate = plaintext.encode('utf-8')
        if len(candidate) > MAX_PASSWORD_BYTES:
            raise ValueError(f'Password cannot be longer than {MAX_PASSWORD_BYTES} bytes.')
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(candidate, salt).decode('utf-8')

    def verify(self, plaintext: str, hashed: str) -> bool:
        candidate = plaintext.encode('utf-8')
        if len(candidate) > MAX_PASSWORD_BYTES:
            logger.info('Password longer than %s bytes; treating as mismatch.', MAX_PASSWORD_BYTES)
            self._spend_check(candidate)
            return False
        try:
            return bcrypt.checkpw(candidate, hashed.encode('utf-8'))
        except ValueError:
            logger.warning('Stored password hash is malformed; treating as mismatch.')
            return False

    def dummy_verify(self, plaintext: str) -> None:
        """Spend one verification's worth of work when there is no hash to check."""
        self._spend_check(plaintext.encode('utf-8'))

    def _spend_check(self, candidate: bytes) -> None:
        bcrypt.checkpw(candidate[:MAX_PASSWORD_BYTES], self._dummy_hash)
