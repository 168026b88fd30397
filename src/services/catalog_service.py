"""Catalog service: task types a group can pick from when recording a task.

Editing a catalog item only affects tasks created afterwards; recorded tasks keep
the value they were created with.
"""

import logging

from src.core.config import constants
from src.core.errors import EntityNotFoundError
from src.core.logging import span
from src.domain.catalog import CatalogItem
from src.domain.create_models import CatalogItemCreate
from src.domain.update_models import CatalogItemUpdate
from src.models.service_models import CatalogItemSummary
from src.services.deps import LedgerDeps


logger = logging.getLogger(__name__)


# Starter catalogs offered when a group is created: (name, default_value, icon)
CATALOG_TEMPLATES: dict[str, list[tuple[str, float, str]]] = {
    "flatshare": [
        ("Dishes", 10, "🍽️"),
        ("Trash", 5, "🗑️"),
        ("Cleaning", 20, "🧹"),
        ("Groceries", 15, "🛒"),
        ("Laundry", 10, "👕"),
    ],
    "family": [
        ("Cooking", 15, "🍳"),
        ("Groceries", 20, "🛒"),
        ("Cleaning", 15, "🧹"),
        ("Gardening", 10, "🌱"),
        ("Repairs", 20, "🔧"),
    ],
}


def _to_summary(item: CatalogItem) -> CatalogItemSummary:
    return CatalogItemSummary(id=item.id, name=item.name, default_value=item.default_value, icon=item.icon)


async def create_catalog_item(deps: LedgerDeps, payload: CatalogItemCreate) -> CatalogItemSummary:
    """Add a task type to a group catalog."""
    with span("catalog_service.create_catalog_item"):
        created = await deps.catalog.create(payload)
        logger.info("Created catalog item %s in group %s", created.name, created.group_id)
        return _to_summary(created)


async def update_catalog_item(
    deps: LedgerDeps,
    catalog_id: str,
    payload: CatalogItemUpdate,
) -> CatalogItemSummary:
    """Update the name, default value and/or icon of a catalog item.

    Args:
        deps: Storage collaborators
        catalog_id: Item to update
        payload: Fields to change; unset fields are kept

    Returns:
        The updated item

    Raises:
        EntityNotFoundError: If the item does not exist
    """
    with span("catalog_service.update_catalog_item"):
        existing = await deps.catalog.find_by_id(catalog_id)
        if existing is None:
            raise EntityNotFoundError("CatalogItem", catalog_id)

        updated = await deps.catalog.update(catalog_id, payload)
        logger.info(
            "Updated catalog item %s (fields: %s)",
            catalog_id,
            ", ".join(sorted(payload.model_dump(exclude_none=True))) or "none",
        )
        return _to_summary(updated)


async def seed_catalog_from_template(deps: LedgerDeps, group_id: str, template: str | None) -> list[CatalogItemSummary]:
    """Create the starter catalog of a group from a named template.

    Unknown templates and the custom template seed nothing.
    """
    with span("catalog_service.seed_catalog_from_template"):
        if template is None or template == constants.TEMPLATE_CUSTOM:
            return []

        entries = CATALOG_TEMPLATES.get(template)
        if entries is None:
            logger.warning("Unknown catalog template %r for group %s", template, group_id)
            return []

        seeded = []
        for name, default_value, icon in entries:
            created = await deps.catalog.create(
                CatalogItemCreate(group_id=group_id, name=name, default_value=default_value, icon=icon)
            )
            seeded.append(_to_summary(created))

        logger.info("Seeded %d catalog items from template %s for group %s", len(seeded), template, group_id)
        return seeded
