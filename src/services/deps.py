"""Dependencies injected into ledger services."""

from dataclasses import dataclass, field

from src.core.config import Settings, settings
from src.domain.ports import CatalogRepository, TaskRepository, UserRepository


@dataclass
class LedgerDeps:
    """Storage collaborators and settings used by the services layer."""

    users: UserRepository
    tasks: TaskRepository
    catalog: CatalogRepository
    settings: Settings = field(default_factory=lambda: settings)
