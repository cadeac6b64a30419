"""User model definitions."""

from sqlalchemy import Column, Integer, String
from landing.database import Base


class User(Base):
    """Represents an administrator account."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash
    status = Column(String, nullable=False)  # active/new
