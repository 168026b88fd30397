"""Domain models and DTOs."""

from src.domain.balance import UserBalance
from src.domain.catalog import CatalogItem
from src.domain.create_models import CatalogItemCreate, TaskCreate
from src.domain.task import Task
from src.domain.update_models import CatalogItemUpdate
from src.domain.user import User


__all__ = [
    "CatalogItem",
    "CatalogItemCreate",
    "CatalogItemUpdate",
    "Task",
    "TaskCreate",
    "User",
    "UserBalance",
]
