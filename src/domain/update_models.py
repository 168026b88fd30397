"""Update models for database operations."""

from pydantic import BaseModel, Field


class CatalogItemUpdate(BaseModel):
    """Partial update of a catalog item. Unset fields are left untouched."""

    name: str | None = Field(default=None, min_length=1)
    default_value: float | None = Field(default=None, ge=0)
    icon: str | None = None
