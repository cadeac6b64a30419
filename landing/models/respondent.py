"""Respondent model definitions."""

from sqlalchemy import Column, Integer, DateTime, String
from sqlalchemy.sql import func
from landing.database import Base


class Respondent(Base):
    """Represents an email address submitted through the sign-up form."""
    __tablename__ = "respondents"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
