"""Computed balance of a single user."""

from pydantic import BaseModel, ConfigDict


class UserBalance(BaseModel):
    """Points generated and consumed by a user over a set of tasks.

    Positive balance means the user contributed more than they consumed,
    negative means they owe effort to the group.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    points_generated: float = 0.0
    points_consumed: float = 0.0
    balance: float = 0.0
