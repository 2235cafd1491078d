"""Base model infrastructure for SQLAlchemy models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


# Shared limit for entity display names
NAME_MAX_LENGTH = 100
