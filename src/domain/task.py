"""Task domain model: one point-valued chore event."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.errors import TaskBeneficiariesEmptyError, TaskValueInvalidError


class Task(BaseModel):
    """Immutable record of a chore performed for a set of beneficiaries.

    The value is a snapshot taken when the task is created; later edits to the
    catalog item it came from never change it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique task ID")
    value: float = Field(..., description="Points value of the task, frozen at creation")
    doer_id: str = Field(..., description="ID of the user who performed the task")
    beneficiary_ids: tuple[str, ...] = Field(
        ..., description="IDs of the users sharing the cost (kept exactly as given)"
    )
    group_id: str = Field(..., description="ID of the group the task belongs to")
    catalog_id: str | None = Field(default=None, description="Catalog item the task was instantiated from")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Creation timestamp",
    )

    @field_validator("value")
    @classmethod
    def validate_value_non_negative(cls, v: float) -> float:
        """Reject negative point values."""
        if v < 0:
            raise TaskValueInvalidError(v)
        return v

    @field_validator("created_at")
    @classmethod
    def normalize_created_at_utc(cls, v: datetime) -> datetime:
        """Store timestamps in UTC; naive values are taken to be UTC already."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    @field_validator("beneficiary_ids")
    @classmethod
    def validate_has_beneficiaries(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Require at least one beneficiary."""
        if len(v) == 0:
            raise TaskBeneficiariesEmptyError()
        return v

    @property
    def beneficiary_count(self) -> int:
        """Number of beneficiaries who share the cost."""
        return len(self.beneficiary_ids)

    @property
    def cost_per_beneficiary(self) -> float:
        """Share of the value charged to each beneficiary."""
        return self.value / self.beneficiary_count

    @property
    def created_at_iso(self) -> str:
        """Creation timestamp as ISO-8601 UTC with millisecond precision (e.g., 2026-01-19T08:00:00.000Z)."""
        return self.created_at.isoformat(timespec="milliseconds").replace("+00:00", "Z")
