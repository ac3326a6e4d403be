"""Remove permission overrides use case."""

from useroverrides.application.dto.actor import Actor
from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import PermissionChecker, UnitOfWorkFactory
from useroverrides.application.use_cases.access import (
    MANAGE_PERMISSIONS,
    find_target,
    require_login,
    require_permission,
)
from useroverrides.domain.entities import OverrideRecord, UserAccount
from useroverrides.domain.exceptions import InvalidArgument, NotFound
from useroverrides.domain.value_objects import Permission


class RemovePermissionsUseCase:
    """Drop permission overrides by name; `x` and `!x` both remove `x`."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        store: OverrideStore,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor: Actor,
        target_name: str,
        permissions: list[str],
    ) -> UserAccount:
        require_login(actor)
        await require_permission(self._permission_checker, actor, MANAGE_PERMISSIONS)
        if not permissions:
            raise InvalidArgument("At least one permission is required.")
        parsed = [Permission.parse(p) for p in permissions]

        target = await find_target(self._uow_factory, target_name)

        def revoke(record: OverrideRecord) -> None:
            for permission in parsed:
                record.permissions.remove(permission)

        try:
            await self._store.modify(target.id, revoke)
        except NotFound:
            raise NotFound("This user has no custom permissions.") from None
        return target
