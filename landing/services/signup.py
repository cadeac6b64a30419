"""Sign-up form submission and the admin listing of respondents."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_validator

from landing.core.errors import ConflictError
from landing.repositories.respondent_repository import RespondentRepository

INVALID_EMAIL_MESSAGE = 'Please enter a valid email address'
CREATED_MESSAGE = 'Thank you for signing up!'
ALREADY_REGISTERED_MESSAGE = "You're already signed up!"


class SignupRequest(BaseModel):
    email: str

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if len(normalized) <= 3 or '@' not in normalized:
            raise ValueError(INVALID_EMAIL_MESSAGE)
        return normalized


class RespondentRow(BaseModel):
    id: int
    email: str
    created_at: datetime

    class Config:
        from_attributes = True


class SignupResult(BaseModel):
    outcome: Literal['created', 'already_registered']
    message: str
    respondent: RespondentRow | None = None


def sign_up(repository: RespondentRepository, email: str) -> SignupResult:
    """Record a sign-up. Raises pydantic.ValidationError for a bad address."""
    request = SignupRequest(email=email)

    try:
        respondent = repository.create(request.email)
    except ConflictError:
        return SignupResult(outcome='already_registered', message=ALREADY_REGISTERED_MESSAGE)

    return SignupResult(
        outcome='created',
        message=CREATED_MESSAGE,
        respondent=RespondentRow.model_validate(respondent),
    )


def list_respondents(repository: RespondentRepository) -> list[RespondentRow]:
    return [RespondentRow.model_validate(respondent) for respondent in repository.get_all()]
