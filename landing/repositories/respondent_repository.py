"""Data access for sign-up form respondents."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from landing.core.errors import ConflictError, NotFoundError, StoreFailureError
from landing.database import Store
from landing.models.respondent import Respondent

logger = logging.getLogger(__name__)


class RespondentRepository:
    """CRUD operations on the respondents table.

    Duplicate emails are rejected by the table's unique constraint, not by a
    lookup beforehand.
    """

    def __init__(self, store: Store) -> None:
        self.store = store

    def create(self, email: str) -> Respondent:
        respondent = Respondent(email=email)
        try:
            with self.store.session() as db:
                db.add(respondent)
                db.commit()
                db.refresh(respondent)
        except IntegrityError as exc:
            logger.warning('Respondent creation rejected: %s', exc.orig)
            raise ConflictError('Failed to create respondent.') from exc
        except SQLAlchemyError as exc:
            logger.exception('Error creating respondent.')
            raise StoreFailureError('Failed to create respondent.') from exc
        return respondent

    def get_by_id(self, respondent_id: int) -> Respondent | None:
        try:
            with self.store.session() as db:
                return db.get(Respondent, respondent_id)
        except SQLAlchemyError as exc:
            logger.exception('Error retrieving respondent %s.', respondent_id)
            raise StoreFailureError('Failed to retrieve respondent.') from exc

    def get_by_email(self, email: str) -> Respondent | None:
        try:
            with self.store.session() as db:
                return db.query(Respondent).filter(Respondent.email == email).first()
        except SQLAlchemyError as exc:
            logger.exception('Error retrieving respondent by email.')
            raise StoreFailureError('Failed to retrieve respondent.') from exc

    def get_all(self) -> list[Respondent]:
        try:
            with self.store.session() as db:
                return (
                    db.query(Respondent)
                    .order_by(Respondent.created_at.desc(), Respondent.id.desc())
                    .all()
                )
        except SQLAlchemyError as exc:
            logger.exception('Error retrieving respondents.')
            raise StoreFailureError('Failed to retrieve respondents.') from exc

    def delete(self, respondent_id: int) -> Respondent:
        try:
            with self.store.session() as db:
                respondent = db.get(Respondent, respondent_id)
                if respondent is None:
                    raise NotFoundError('Failed to delete respondent.')
                db.delete(respondent)
                db.commit()
        except SQLAlchemyError as exc:
            logger.exception('Error deleting respondent %s.', respondent_id)
            raise StoreFailureError('Failed to delete respondent.') from exc
        return respondent
