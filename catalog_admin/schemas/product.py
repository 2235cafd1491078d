"""Product read models, list page and form values."""

from pydantic import BaseModel, Field, field_validator

from catalog_admin.core.errors import FormValidationError
from catalog_admin.core.pagination import Pagination
from catalog_admin.models.base import NAME_MAX_LENGTH
from catalog_admin.schemas.common import coerce_form_id


class ProductRead(BaseModel):
    """Product with its category name resolved."""

    id: int
    name: str
    category_id: int
    category_name: str | None = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_row(cls, row) -> "ProductRead":
        return cls(
            id=row.id,
            name=row.name,
            category_id=row.category_id,
            category_name=row.category.name if row.category is not None else None,
        )


class ProductPage(BaseModel):
    """One page of the product list."""

    items: list[ProductRead] = Field(default_factory=list)
    pagination: Pagination


class CategoryOption(BaseModel):
    """Entry in the category select list."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class ProductForm(BaseModel):
    """Values submitted from the create/edit form."""

    id: int | None = Field(default=None, description="Hidden id on the edit form")
    name: str = Field(default="")
    category_id: int = Field(default=0, description="0 means nothing selected")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return coerce_form_id(value)

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, value):
        return "" if value is None else str(value).strip()

    @field_validator("category_id", mode="before")
    @classmethod
    def _coerce_category(cls, value):
        # Browsers post "" for the placeholder option
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0

    def require_valid(self) -> None:
        """Raise FormValidationError if the form cannot be written."""
        if not self.name:
            raise FormValidationError("Product name is required")
        if len(self.name) > NAME_MAX_LENGTH:
            raise FormValidationError(
                f"Product name must be at most {NAME_MAX_LENGTH} characters"
            )
        if self.category_id <= 0:
            raise FormValidationError("Please select a category")
