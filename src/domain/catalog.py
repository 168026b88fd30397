"""Catalog domain model: reusable task templates of a group."""

from pydantic import BaseModel, ConfigDict, Field


class CatalogItem(BaseModel):
    """Named task type with a default point value.

    Only the default value is read when a task is created from the item; the task
    keeps its own copy afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique catalog item ID")
    name: str = Field(..., description="Task type name (e.g., 'Dishes')")
    default_value: float = Field(..., ge=0, description="Points suggested for new tasks of this type")
    icon: str = Field(default="", description="Emoji or icon identifier")
    group_id: str = Field(..., description="ID of the group owning the catalog")
