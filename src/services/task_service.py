"""Task service: recording performed tasks for a group."""

import logging
import uuid

from src.core.errors import DomainError, EntityNotFoundError
from src.core.logging import log_with_group_context, span
from src.domain.create_models import TaskCreate
from src.domain.task import Task
from src.models.service_models import TaskCreated
from src.services.deps import LedgerDeps


logger = logging.getLogger(__name__)


async def _resolve_value(deps: LedgerDeps, payload: TaskCreate) -> float:
    """Return the explicit value, or the catalog item's default value as a snapshot."""
    if payload.catalog_id is not None:
        item = await deps.catalog.find_by_id(payload.catalog_id)
        if item is None or item.group_id != payload.group_id:
            raise EntityNotFoundError("CatalogItem", payload.catalog_id)
        if payload.value is None:
            return item.default_value

    if payload.value is None:
        raise DomainError("Task value is required when no catalog item is given")
    return payload.value


async def create_task(deps: LedgerDeps, payload: TaskCreate) -> TaskCreated:
    """Record a task performed by a group member.

    Args:
        deps: Storage collaborators
        payload: Doer, beneficiaries and value of the task

    Returns:
        TaskCreated describing the stored task

    Raises:
        EntityNotFoundError: If the doer, a beneficiary or the catalog item is not in the group
        DomainError: If no value can be determined
        pydantic.ValidationError: If the value is negative or there are no beneficiaries
    """
    with span("task_service.create_task"):
        group_users = await deps.users.find_by_group_id(payload.group_id)
        member_ids = {user.id for user in group_users}

        if payload.doer_id not in member_ids:
            raise EntityNotFoundError("User", payload.doer_id)

        for beneficiary_id in payload.beneficiary_ids:
            if beneficiary_id not in member_ids:
                raise EntityNotFoundError("User", beneficiary_id)

        value = await _resolve_value(deps, payload)

        task = Task(
            id=str(uuid.uuid4()),
            value=value,
            doer_id=payload.doer_id,
            beneficiary_ids=tuple(payload.beneficiary_ids),
            group_id=payload.group_id,
            catalog_id=payload.catalog_id,
        )

        saved = await deps.tasks.save(task)
        log_with_group_context(
            logger,
            "info",
            "Task recorded",
            group_id=saved.group_id,
            task_id=saved.id,
            doer_id=saved.doer_id,
            value=saved.value,
            beneficiary_count=saved.beneficiary_count,
        )

        return TaskCreated(
            id=saved.id,
            value=saved.value,
            doer_id=saved.doer_id,
            beneficiary_ids=list(saved.beneficiary_ids),
            group_id=saved.group_id,
            catalog_id=saved.catalog_id,
            created_at=saved.created_at_iso,
        )
