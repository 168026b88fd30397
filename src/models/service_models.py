"""Pydantic models for service layer return types.

These models are the display-ready shapes handed to the presentation layer.
"""

from pydantic import BaseModel


class UserBalanceEntry(BaseModel):
    """Balance of one group member, with their display name."""

    user_id: str
    user_name: str
    points_generated: float
    points_consumed: float
    balance: float


class SuggestedDoer(BaseModel):
    """User suggested to perform the next task."""

    user_id: str
    user_name: str


class TaskHistoryItem(BaseModel):
    """Task entry in the group activity feed."""

    id: str
    task_name: str
    doer_name: str
    value: float
    date: str


class CatalogItemSummary(BaseModel):
    """Catalog item as shown to group members."""

    id: str
    name: str
    default_value: float
    icon: str


class GroupDashboard(BaseModel):
    """Everything the group dashboard needs in one payload."""

    group_id: str
    balances: list[UserBalanceEntry]
    suggested_next_doer: SuggestedDoer | None
    history: list[TaskHistoryItem]
    catalog: list[CatalogItemSummary]


class TaskCreated(BaseModel):
    """Result of recording a task."""

    id: str
    value: float
    doer_id: str
    beneficiary_ids: list[str]
    group_id: str
    catalog_id: str | None = None
    created_at: str
