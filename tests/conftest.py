"""Pytest fixtures for user overrides tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import pytest

from useroverrides.application.dto.actor import Actor
from useroverrides.application.override_store import OverrideStore
from useroverrides.config import ChatConfigLoader
from useroverrides.domain.entities import Group, OverrideRecord, UserAccount
from useroverrides.domain.exceptions import StorageFailure


# --- Fake storage ---


class FakeDatabase:
    """Tables shared by every FakeUnitOfWork created for one test."""

    def __init__(self) -> None:
        self.records: dict[int, OverrideRecord] = {}
        self.accounts: list[UserAccount] = []
        self.groups: dict[str, Group] = {}
        self.fail_writes = False
        self.fail_reads = False
        self.write_delay = 0.0

    def add_account(self, account: UserAccount) -> UserAccount:
        self.accounts.append(account)
        return account


class FakeOverrideRepository:
    """In-memory override repository. Stores copies like a real table would."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def _check_writable(self) -> None:
        if self._db.write_delay:
            await asyncio.sleep(self._db.write_delay)
        if self._db.fail_writes:
            raise StorageFailure("simulated storage failure")

    async def list_all(self) -> list[OverrideRecord]:
        return [r.copy() for r in self._db.records.values()]

    async def get(self, user_id: int) -> OverrideRecord | None:
        record = self._db.records.get(user_id)
        return record.copy() if record else None

    async def create(self, record: OverrideRecord) -> OverrideRecord:
        await self._check_writable()
        self._db.records[record.user_id] = record.copy()
        return record

    async def update(self, record: OverrideRecord) -> None:
        await self._check_writable()
        self._db.records[record.user_id] = record.copy()

    async def delete(self, user_id: int) -> None:
        await self._check_writable()
        self._db.records.pop(user_id, None)


class FakeUserRepository:
    """In-memory account and group directory."""

    def __init__(self, db: FakeDatabase) -> None:
        self._db = db

    async def get_by_id(self, user_id: int) -> UserAccount | None:
        if self._db.fail_reads:
            raise StorageFailure("simulated storage failure")
        for account in self._db.accounts:
            if account.id == user_id:
                return account
        return None

    async def find_by_name(self, name: str) -> list[UserAccount]:
        exact = [a for a in self._db.accounts if a.name.lower() == name.lower()]
        if exact:
            return exact
        return [a for a in self._db.accounts if a.name.lower().startswith(name.lower())]

    async def get_group(self, group_name: str) -> Group | None:
        return self._db.groups.get(group_name)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self, db: FakeDatabase | None = None) -> None:
        self.db = db or FakeDatabase()
        self.overrides = FakeOverrideRepository(self.db)
        self.users = FakeUserRepository(self.db)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(db: FakeDatabase):
    """Factory returning async context manager with FakeUnitOfWork over `db`."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield FakeUnitOfWork(db)

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Database with a default group and three accounts (two named Bob)."""
    db = FakeDatabase()
    db.groups["default"] = Group(
        name="default", prefix="[Guest] ", color="255,255,255", permissions=["tshock.chat"]
    )
    db.groups["admin"] = Group(name="admin", prefix="[Admin] ", permissions=["*"])
    db.add_account(UserAccount(id=1, name="Alice", group_name="default"))
    db.add_account(UserAccount(id=2, name="Bob", group_name="default"))
    db.add_account(UserAccount(id=3, name="Bob", group_name="default"))
    db.add_account(UserAccount(id=4, name="Carol", group_name="admin"))
    return db


@pytest.fixture
def uow_factory(fake_db: FakeDatabase):
    return make_uow_factory(fake_db)


@pytest.fixture
def store(uow_factory) -> OverrideStore:
    return OverrideStore(uow_factory)


@pytest.fixture
def alice(fake_db: FakeDatabase) -> UserAccount:
    return fake_db.accounts[0]


@pytest.fixture
def carol(fake_db: FakeDatabase) -> UserAccount:
    return fake_db.accounts[3]


@pytest.fixture
def console() -> Actor:
    return Actor.console()


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - grants everything by default."""
    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.has_permission.return_value = True
    return mock


@pytest.fixture
def config_loader(tmp_path: Path) -> ChatConfigLoader:
    """Chat config with default limits written to a temp file."""
    return ChatConfigLoader(tmp_path / "useroverrides.json")
