from src.services import (
    balance_calculator,
    catalog_service,
    dashboard_service,
    task_service,
)


__all__ = [
    "balance_calculator",
    "catalog_service",
    "dashboard_service",
    "task_service",
]
