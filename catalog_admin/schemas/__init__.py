"""Pydantic schemas for pages, forms and JSON responses."""

from catalog_admin.schemas.category import CategoryForm, CategoryRead
from catalog_admin.schemas.common import ErrorResponse, HealthResponse, TestDataResult
from catalog_admin.schemas.product import (
    CategoryOption,
    ProductForm,
    ProductPage,
    ProductRead,
)

__all__ = [
    "CategoryForm",
    "CategoryRead",
    "CategoryOption",
    "ErrorResponse",
    "HealthResponse",
    "TestDataResult",
    "ProductForm",
    "ProductPage",
    "ProductRead",
]
