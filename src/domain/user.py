"""User domain model."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Group member, referenced by ID in tasks and balances."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique user ID")
    name: str = Field(..., description="Display name of the user")
    email: str = Field(..., description="Email address")
