"""Dashboard service: balances, next-doer suggestion, history and catalog of a group.

Key Concepts:
- Balances: one entry per member, most negative first (whoever owes the most
  effort is shown on top). Members without activity appear with a zero balance.
- Suggested next doer: the member with the lowest balance.
- History: most recent tasks first, trimmed to the configured limit.
"""

import asyncio
import logging

from src.core.logging import log_with_group_context, span
from src.domain.catalog import CatalogItem
from src.domain.task import Task
from src.domain.user import User
from src.models.service_models import (
    CatalogItemSummary,
    GroupDashboard,
    SuggestedDoer,
    TaskHistoryItem,
    UserBalanceEntry,
)
from src.services import balance_calculator
from src.services.deps import LedgerDeps


logger = logging.getLogger(__name__)


def _build_history(
    *,
    tasks: list[Task],
    users: list[User],
    catalog_items: list[CatalogItem],
    limit: int,
    default_task_name: str,
    unknown_user_name: str,
) -> list[TaskHistoryItem]:
    """Return the ``limit`` most recent tasks as history items."""
    user_names = {user.id: user.name for user in users}
    catalog_names = {item.id: item.name for item in catalog_items}

    recent = sorted(tasks, key=lambda task: task.created_at, reverse=True)[:limit]

    return [
        TaskHistoryItem(
            id=task.id,
            task_name=catalog_names.get(task.catalog_id, default_task_name) if task.catalog_id else default_task_name,
            doer_name=user_names.get(task.doer_id, unknown_user_name),
            value=task.value,
            date=task.created_at_iso,
        )
        for task in recent
    ]


async def get_group_dashboard(deps: LedgerDeps, group_id: str) -> GroupDashboard:
    """Assemble the dashboard of a group.

    Args:
        deps: Storage collaborators
        group_id: Group to build the dashboard for

    Returns:
        GroupDashboard with sorted balances, suggestion, history and catalog
    """
    with span("dashboard_service.get_group_dashboard"):
        users, tasks, catalog_items = await asyncio.gather(
            deps.users.find_by_group_id(group_id),
            deps.tasks.find_by_group_id(group_id),
            deps.catalog.find_by_group_id(group_id),
        )

        balances_map = balance_calculator.compute_balances(users, tasks)
        if not balance_calculator.check_zero_sum(balances_map, tolerance=deps.settings.balance_tolerance):
            log_with_group_context(
                logger,
                "warning",
                "Group balances do not sum to zero; some tasks reference users outside the group",
                group_id=group_id,
            )

        balances: list[UserBalanceEntry] = []
        for user in users:
            user_balance = balances_map.get(user.id)
            balances.append(
                UserBalanceEntry(
                    user_id=user.id,
                    user_name=user.name,
                    points_generated=user_balance.points_generated if user_balance else 0.0,
                    points_consumed=user_balance.points_consumed if user_balance else 0.0,
                    balance=user_balance.balance if user_balance else 0.0,
                )
            )
        balances.sort(key=lambda entry: entry.balance)

        suggested_user = balance_calculator.suggest_next_doer(users, tasks)
        suggested = SuggestedDoer(user_id=suggested_user.id, user_name=suggested_user.name) if suggested_user else None

        history = _build_history(
            tasks=tasks,
            users=users,
            catalog_items=catalog_items,
            limit=deps.settings.dashboard_history_limit,
            default_task_name=deps.settings.default_task_name,
            unknown_user_name=deps.settings.unknown_user_name,
        )

        catalog = [
            CatalogItemSummary(id=item.id, name=item.name, default_value=item.default_value, icon=item.icon)
            for item in catalog_items
        ]

        log_with_group_context(
            logger,
            "info",
            "Built group dashboard",
            group_id=group_id,
            member_count=len(users),
            task_count=len(tasks),
        )

        return GroupDashboard(
            group_id=group_id,
            balances=balances,
            suggested_next_doer=suggested,
            history=history,
            catalog=catalog,
        )
