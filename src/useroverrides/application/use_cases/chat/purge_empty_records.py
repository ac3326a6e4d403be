"""Purge empty override records use case."""

from useroverrides.application.dto.actor import Actor
from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import PermissionChecker
from useroverrides.application.use_cases.access import PURGE, require_permission


class PurgeEmptyRecordsUseCase:
    """Delete records that carry no chat attributes and no permissions."""

    def __init__(self, store: OverrideStore, permission_checker: PermissionChecker) -> None:
        self._store = store
        self._permission_checker = permission_checker

    async def execute(self, actor: Actor) -> int:
        await require_permission(self._permission_checker, actor, PURGE)
        return await self._store.purge_empty()
