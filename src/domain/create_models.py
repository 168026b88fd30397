"""Pydantic models for creating records."""

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    """Payload for recording a performed task."""

    group_id: str = Field(..., description="Group the task belongs to")
    doer_id: str = Field(..., description="User who performed the task")
    beneficiary_ids: list[str] = Field(..., description="Users present who share the cost")
    catalog_id: str | None = Field(default=None, description="Catalog item the task comes from")
    value: float | None = Field(
        default=None,
        description="Points value; defaults to the catalog item's default value when omitted",
    )


class CatalogItemCreate(BaseModel):
    """Payload for adding a task type to a group catalog."""

    group_id: str = Field(..., description="Group owning the catalog")
    name: str = Field(..., min_length=1, description="Task type name")
    default_value: float = Field(..., ge=0, description="Default points value")
    icon: str = Field(default="", description="Emoji or icon identifier")
