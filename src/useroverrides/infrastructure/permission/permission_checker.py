"""Permission checker implementation - user overrides first, then the group."""

from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import UnitOfWorkFactory
from useroverrides.domain.entities import UserAccount
from useroverrides.domain.resolution import resolve_permission
from useroverrides.domain.value_objects import PermissionResult


class OverridePermissionChecker:
    """Checks an account's permission against its override record and group."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, store: OverrideStore) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store

    async def has_permission(self, account: UserAccount, permission: str) -> bool:
        """Granted/denied overrides decide; unhandled falls back to the group."""
        result = resolve_permission(await self._store.get(account.id), permission)
        if result is PermissionResult.GRANTED:
            return True
        if result is PermissionResult.DENIED:
            return False

        async with self._uow_factory() as uow:
            group = await uow.users.get_group(account.group_name)
        return group is not None and group.has_permission(permission)
