"""Core module - Pagination and application errors."""

from catalog_admin.core.errors import (
    CatalogError,
    CategoryInUseError,
    FormValidationError,
    NotFoundError,
    StoreError,
)
from catalog_admin.core.pagination import (
    Pagination,
    clamp_page,
    page_offset,
    parse_page,
    total_pages,
)

__all__ = [
    "CatalogError",
    "CategoryInUseError",
    "FormValidationError",
    "NotFoundError",
    "StoreError",
    "Pagination",
    "clamp_page",
    "page_offset",
    "parse_page",
    "total_pages",
]
