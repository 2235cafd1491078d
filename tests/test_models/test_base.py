"""Tests for base model infrastructure."""

from sqlalchemy.orm import DeclarativeBase

from catalog_admin.models import Base


def test_base_is_declarative_base():
    """Base should be a SQLAlchemy DeclarativeBase."""
    assert hasattr(Base, "metadata")
    assert issubclass(Base, DeclarativeBase)


def test_metadata_has_both_tables():
    assert {"categories", "products"} <= set(Base.metadata.tables)
