"""Application exceptions.

Each carries a user-facing message and the HTTP status its page is rendered
with. Anything else falls through to the global exception handler.
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for catalog errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """Requested entity id is missing or has no row."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int | None = None) -> None:
        if entity_id is None:
            message = f"{entity} not found"
        else:
            message = f"{entity} {entity_id} not found"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id


class FormValidationError(CatalogError):
    """Submitted form values were rejected before any write."""

    status_code = 422


class StoreError(CatalogError):
    """A write failed at the storage layer and was rolled back."""

    status_code = status.HTTP_400_BAD_REQUEST


class CategoryInUseError(CatalogError):
    """Category still has products referencing it and cannot be deleted."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, category_id: int, product_count: int) -> None:
        super().__init__(
            f"Cannot delete category: {product_count} product(s) still belong to it"
        )
        self.category_id = category_id
        self.product_count = product_count
