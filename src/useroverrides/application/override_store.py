"""Override store - cached, transactional access to override records."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from useroverrides.application.ports import UnitOfWorkFactory
from useroverrides.domain.entities import ChatData, OverrideRecord
from useroverrides.domain.exceptions import DuplicateKey, NotFound, StorageFailure

logger = logging.getLogger(__name__)

RecordListener = Callable[[int, OverrideRecord | None], Awaitable[None]]
RecordMutation = Callable[[OverrideRecord], None]


class OverrideStore:
    """Keyed override records mirrored from storage into an in-memory cache.

    Every operation runs under one lock. Writes commit to storage first and
    only then touch the cache, so a failed transaction leaves the previous
    state visible. Callers always receive copies.
    """

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory
        self._cache: dict[int, OverrideRecord] = {}
        self._lock = asyncio.Lock()
        self._listeners: list[RecordListener] = []
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        """True once load() has completed at least once."""
        return self._loaded

    def add_listener(self, listener: RecordListener) -> None:
        """Register a callback run after each committed write and each load.

        On load every user id present before or after the reload is reported,
        with None for ids that are gone.

        Listeners run while the store lock is held and must not call back
        into the store.
        """
        self._listeners.append(listener)

    async def load(self) -> int:
        """Replace the cache with the current contents of storage."""
        async with self._lock:
            async with self._uow_factory() as uow:
                records = await uow.overrides.list_all()
            previous_ids = set(self._cache)
            self._cache = {r.user_id: r for r in records}
            self._loaded = True
            logger.info("Loaded %d override records", len(self._cache))
            for user_id in sorted(previous_ids | set(self._cache)):
                await self._notify(user_id, self._cache.get(user_id))
            return len(self._cache)

    async def get(self, user_id: int) -> OverrideRecord | None:
        async with self._lock:
            record = self._cache.get(user_id)
            return record.copy() if record else None

    async def list(self) -> list[OverrideRecord]:
        async with self._lock:
            return [self._cache[k].copy() for k in sorted(self._cache)]

    async def add(self, record: OverrideRecord) -> OverrideRecord:
        """Insert a new record; DuplicateKey if the user already has one."""
        async with self._lock:
            if record.user_id in self._cache:
                raise DuplicateKey(f"Override record for user {record.user_id} already exists")
            await self._insert(record)
            return record.copy()

    async def update(self, record: OverrideRecord) -> OverrideRecord:
        """Persist all fields and replace the stored permission set."""
        async with self._lock:
            if record.user_id not in self._cache:
                raise NotFound(f"No override record for user {record.user_id}")
            await self._replace(record)
            return record.copy()

    async def save(self, record: OverrideRecord) -> OverrideRecord:
        """Insert or update in one step."""
        async with self._lock:
            if record.user_id in self._cache:
                await self._replace(record)
            else:
                await self._insert(record)
            return record.copy()

    async def modify(
        self,
        user_id: int,
        mutate: RecordMutation,
        create_if_missing: bool = False,
    ) -> OverrideRecord | None:
        """Read, change and persist one record under a single lock acquisition.

        `mutate` receives a working copy (a blank record when `create_if_missing`
        is set and the user has none). A record left empty is deleted and None
        is returned. Exceptions raised by `mutate` leave storage untouched.
        """
        async with self._lock:
            current = self._cache.get(user_id)
            if current is None and not create_if_missing:
                raise NotFound(f"No override record for user {user_id}")
            if current is None:
                record = OverrideRecord(user_id=user_id, chat=ChatData())
            else:
                record = current.copy()
            mutate(record)

            if record.is_empty():
                if current is not None:
                    await self._delete(user_id)
                return None
            if current is None:
                await self._insert(record)
            else:
                await self._replace(record)
            return record.copy()

    async def remove(self, user_id: int) -> None:
        """Delete the record and its permission rows."""
        async with self._lock:
            if user_id not in self._cache:
                raise NotFound(f"No override record for user {user_id}")
            await self._delete(user_id)

    async def purge_empty(self) -> int:
        """Remove every record without display attributes or permissions."""
        async with self._lock:
            empty = [uid for uid, r in self._cache.items() if r.is_empty()]
            for user_id in empty:
                await self._delete(user_id)
            if empty:
                logger.info("Purged %d empty override records", len(empty))
            return len(empty)

    async def _insert(self, record: OverrideRecord) -> None:
        try:
            async with self._uow_factory() as uow:
                await uow.overrides.create(record)
        except StorageFailure:
            logger.exception("Failed to insert override record for user %d", record.user_id)
            raise
        self._cache[record.user_id] = record.copy()
        await self._notify(record.user_id, self._cache[record.user_id])

    async def _replace(self, record: OverrideRecord) -> None:
        try:
            async with self._uow_factory() as uow:
                await uow.overrides.update(record)
        except StorageFailure:
            logger.exception("Failed to update override record for user %d", record.user_id)
            raise
        self._cache[record.user_id] = record.copy()
        await self._notify(record.user_id, self._cache[record.user_id])

    async def _delete(self, user_id: int) -> None:
        try:
            async with self._uow_factory() as uow:
                await uow.overrides.delete(user_id)
        except StorageFailure:
            logger.exception("Failed to delete override record for user %d", user_id)
            raise
        del self._cache[user_id]
        await self._notify(user_id, None)

    async def _notify(self, user_id: int, record: OverrideRecord | None) -> None:
        for listener in self._listeners:
            await listener(user_id, record.copy() if record else None)
