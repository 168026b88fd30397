"""Storage collaborator interfaces consumed by the services layer.

Implementations live outside this package (database adapters); services receive
them explicitly through ``LedgerDeps``.
"""

from typing import Protocol

from src.domain.catalog import CatalogItem
from src.domain.create_models import CatalogItemCreate
from src.domain.task import Task
from src.domain.update_models import CatalogItemUpdate
from src.domain.user import User


class UserRepository(Protocol):
    """Read access to group members."""

    async def find_by_group_id(self, group_id: str) -> list[User]:
        """Return all members of a group."""
        ...


class TaskRepository(Protocol):
    """Persistence of task records."""

    async def find_by_group_id(self, group_id: str) -> list[Task]:
        """Return all tasks of a group, in no particular order."""
        ...

    async def save(self, task: Task) -> Task:
        """Persist a task and return the stored version."""
        ...


class CatalogRepository(Protocol):
    """Persistence of catalog items."""

    async def find_by_group_id(self, group_id: str) -> list[CatalogItem]:
        """Return the catalog of a group."""
        ...

    async def find_by_id(self, catalog_id: str) -> CatalogItem | None:
        """Return the catalog item with the given ID, or None."""
        ...

    async def create(self, data: CatalogItemCreate) -> CatalogItem:
        """Create a catalog item and return it with its assigned ID."""
        ...

    async def update(self, catalog_id: str, data: CatalogItemUpdate) -> CatalogItem:
        """Apply the provided fields of ``data`` and return the updated item."""
        ...
