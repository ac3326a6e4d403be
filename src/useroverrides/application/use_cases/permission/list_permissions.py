"""List permission overrides use case."""

from useroverrides.application.dto.actor import Actor
from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import PermissionChecker, UnitOfWorkFactory
from useroverrides.application.use_cases.access import (
    MANAGE_PERMISSIONS,
    find_target,
    is_self,
    require_login,
    require_permission,
)
from useroverrides.domain.entities import PermissionSet, UserAccount
from useroverrides.domain.exceptions import NotFound


class ListPermissionsUseCase:
    """Return a user's permission overrides. Listing others needs us.permission."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        store: OverrideStore,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store
        self._permission_checker = permission_checker

    async def execute(self, actor: Actor, target_name: str) -> tuple[UserAccount, PermissionSet]:
        require_login(actor)
        target = await find_target(self._uow_factory, target_name)
        if not is_self(actor, target):
            await require_permission(self._permission_checker, actor, MANAGE_PERMISSIONS)

        record = await self._store.get(target.id)
        if record is None or len(record.permissions) == 0:
            raise NotFound("This user has no permissions to list.")
        return target, record.permissions
