"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from useroverrides.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from useroverrides.application.ports.repositories.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of Work - one transaction over the override and user repositories."""

    @property
    def overrides(self) -> OverrideRepository: ...

    @property
    def users(self) -> UserRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Callable returning an async context manager that yields a UnitOfWork.

    Leaving the context commits; an exception rolls back.
    """

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
