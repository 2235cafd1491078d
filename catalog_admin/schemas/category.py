"""Category read model and form values."""

from pydantic import BaseModel, Field, field_validator

from catalog_admin.core.errors import FormValidationError
from catalog_admin.models.base import NAME_MAX_LENGTH
from catalog_admin.schemas.common import coerce_form_id


class CategoryRead(BaseModel):
    """Category as shown on list, detail and delete pages."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class CategoryForm(BaseModel):
    """Values submitted from the create/edit form.

    Business rules run in require_valid() rather than on construction, so a
    rejected submission can still be re-rendered with what was typed.
    """

    id: int | None = Field(default=None, description="Hidden id on the edit form")
    name: str = Field(default="")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return coerce_form_id(value)

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, value):
        return "" if value is None else str(value).strip()

    def require_valid(self) -> None:
        """Raise FormValidationError if the form cannot be written."""
        if not self.name:
            raise FormValidationError("Category name is required")
        if len(self.name) > NAME_MAX_LENGTH:
            raise FormValidationError(
                f"Category name must be at most {NAME_MAX_LENGTH} characters"
            )
