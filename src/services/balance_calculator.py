"""Balance computation for a group of users.

Balance(U) = points generated by U - points consumed by U

- Points generated: sum of task.value for each task where U is the doer
- Points consumed: sum of task.value / beneficiary_count for each occurrence of U
  among a task's beneficiaries

Every task hands out exactly the value it generates, so the balances of a group
sum to zero (within floating-point tolerance). Functions here are pure: no I/O and
no state kept between calls.
"""

import logging
import math
from collections.abc import Iterable, Mapping, Sequence

from src.domain.balance import UserBalance
from src.domain.task import Task
from src.domain.user import User


logger = logging.getLogger(__name__)


def compute_balances(users: Iterable[User], tasks: Iterable[Task]) -> dict[str, UserBalance]:
    """Compute the balance of every user over the given tasks.

    Args:
        users: Group members; each one gets an entry even without any activity
        tasks: Tasks of the group, in any order

    Returns:
        Mapping of user ID to UserBalance, in user order
    """
    generated: dict[str, float] = {}
    consumed: dict[str, float] = {}
    for user in users:
        generated[user.id] = 0.0
        consumed[user.id] = 0.0

    skipped = 0
    for task in tasks:
        cost = task.cost_per_beneficiary

        # IDs outside the roster contribute nothing
        if task.doer_id in generated:
            generated[task.doer_id] += task.value
        else:
            skipped += 1

        for beneficiary_id in task.beneficiary_ids:
            if beneficiary_id in consumed:
                consumed[beneficiary_id] += cost
            else:
                skipped += 1

    if skipped:
        logger.debug("Skipped %d task references to users outside the roster", skipped)

    return {
        user_id: UserBalance(
            user_id=user_id,
            points_generated=generated[user_id],
            points_consumed=consumed[user_id],
            balance=generated[user_id] - consumed[user_id],
        )
        for user_id in generated
    }


def suggest_next_doer(users: Sequence[User], tasks: Iterable[Task]) -> User | None:
    """Return the user who owes the most effort (lowest balance).

    Among users sharing the lowest balance, the first one in ``users`` wins.

    Args:
        users: Group members
        tasks: Tasks of the group

    Returns:
        The suggested user, or None when there are no users
    """
    if not users:
        return None

    balances = compute_balances(users, tasks)
    lowest_user: User | None = None
    lowest_balance = math.inf

    for user in users:
        balance = balances[user.id].balance
        if lowest_user is None or balance < lowest_balance:
            lowest_user = user
            lowest_balance = balance

    return lowest_user


def check_zero_sum(balances: Mapping[str, UserBalance], *, tolerance: float = 1e-10) -> bool:
    """Return True if the balances add up to zero within ``tolerance``."""
    total = math.fsum(entry.balance for entry in balances.values())
    return abs(total) <= tolerance
