"""Tests for Category model."""

from catalog_admin.models import Category


def test_category_tablename():
    """Category should map to categories table."""
    assert Category.__tablename__ == "categories"


def test_category_columns():
    columns = {c.name: c for c in Category.__table__.columns}
    assert set(columns) == {"id", "name"}
    assert columns["id"].primary_key
    assert not columns["name"].nullable
    assert columns["name"].type.length == 100


def test_category_has_products_relationship():
    assert "products" in Category.__mapper__.relationships
