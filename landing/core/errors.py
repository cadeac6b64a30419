"""Error kinds raised by the data-access and login layers.

Every error carries a fixed, caller-safe ``message`` naming the failed
operation. The underlying exception, when there is one, is chained on
``__cause__`` and logged where it was caught.
"""


class RepositoryError(Exception):
    """Base class for failures surfaced by the repositories."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(RepositoryError):
    """The requested row does not exist."""


class ConflictError(RepositoryError):
    """A write was rejected by a uniqueness constraint."""


class StoreFailureError(RepositoryError):
    """The database call failed for any other reason."""


class InvalidCredentialsError(RepositoryError):
    """Login credentials or an access token did not check out."""
