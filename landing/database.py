import logging
from collections.abc import Iterator
from contextlib import contextmanager
from threading import Lock

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from landing.core import config


Base = declarative_base()

logger = logging.getLogger(__name__)

# Tables whose email column must be unique. Older databases may predate the
# constraint, so it is added as an index when missing.
UNIQUE_EMAIL_TABLES = ('users', 'respondents')


class Store:
    """Handle on the relational store shared by every repository."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.engine = create_engine(database_url, echo=echo)
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )
        self._schema_lock = Lock()
        self._schema_checked = False

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_schema(self) -> None:
        # Imported for their side effect of registering tables on Base.
        from landing.models import respondent, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        self.ensure_email_constraints()

    def ensure_email_constraints(self) -> None:
        if self._schema_checked:
            return

        with self._schema_lock:
            if self._schema_checked:
                return

            inspector = inspect(self.engine)
            existing_tables = set(inspector.get_table_names())

            with self.engine.begin() as connection:
                for table_name in UNIQUE_EMAIL_TABLES:
                    if table_name not in existing_tables:
                        continue
                    if _has_unique_email(inspector, table_name):
                        continue
                    logger.info('Adding unique email index to %s.', table_name)
                    connection.execute(
                        text(
                            f'CREATE UNIQUE INDEX IF NOT EXISTS uq_{table_name}_email '
                            f'ON {table_name}(email)'
                        )
                    )

            self._schema_checked = True

    def dispose(self) -> None:
        self.engine.dispose()


def _has_unique_email(inspector, table_name: str) -> bool:
    for constraint in inspector.get_unique_constraints(table_name):
        if constraint['column_names'] == ['email']:
            return True
    for index in inspector.get_indexes(table_name):
        if index.get('unique') and index['column_names'] == ['email']:
            return True
    return False


@contextmanager
def open_store(database_url: str | None = None) -> Iterator[Store]:
    store = Store(database_url or config.DATABASE_URL, echo=config.DATABASE_ECHO)
    try:
        store.create_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')
        store.dispose()
        raise
    except Exception:
        store.dispose()
        raise
    logger.info('Store opened.')
    try:
        yield store
    finally:
        store.dispose()
        logger.info('Store closed.')
