"""SQLAlchemy models for the catalog."""

from catalog_admin.models.base import Base
from catalog_admin.models.category import Category
from catalog_admin.models.product import Product

__all__ = [
    "Base",
    "Category",
    "Product",
]
