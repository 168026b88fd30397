"""Pytest configuration and fixtures for unit tests."""

import pytest

from src.domain.user import User
from src.services.deps import LedgerDeps
from tests.unit.mocks import (
    GROUP_ID,
    InMemoryCatalogRepository,
    InMemoryTaskRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Provides a fresh in-memory user repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    """Provides a fresh in-memory task repository for each test."""
    return InMemoryTaskRepository()


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    """Provides a fresh in-memory catalog repository for each test."""
    return InMemoryCatalogRepository()


@pytest.fixture
def deps(user_repository, task_repository, catalog_repository, test_settings) -> LedgerDeps:
    """Ledger dependencies wired to the in-memory repositories."""
    return LedgerDeps(
        users=user_repository,
        tasks=task_repository,
        catalog=catalog_repository,
        settings=test_settings,
    )


@pytest.fixture
def group_members(user_repository) -> dict[str, User]:
    """Alice, Bob and Charlie as members of GROUP_ID."""
    members = {}
    for user_id in ("alice", "bob", "charlie"):
        members[user_id] = user_repository.add(
            User(id=user_id, name=user_id.capitalize(), email=f"{user_id}@example.com"),
            group_id=GROUP_ID,
        )
    return members
