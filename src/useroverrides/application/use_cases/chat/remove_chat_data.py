"""Remove chat prefix, suffix, color or everything use case."""

from useroverrides.application.dto.actor import Actor
from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import PermissionChecker, UnitOfWorkFactory
from useroverrides.application.use_cases.access import (
    REMOVE_COLOR,
    REMOVE_PREFIX,
    REMOVE_SUFFIX,
    RESET_ALL,
    SET_OTHER,
    find_target,
    is_self,
    require_login,
    require_permission,
)
from useroverrides.domain.entities import OverrideRecord, UserAccount
from useroverrides.domain.exceptions import NotFound
from useroverrides.domain.value_objects import ChatField

_FIELD_PERMISSIONS = {
    ChatField.PREFIX: REMOVE_PREFIX,
    ChatField.SUFFIX: REMOVE_SUFFIX,
    ChatField.COLOR: REMOVE_COLOR,
}


class RemoveChatDataUseCase:
    """Clear one chat attribute (or all of them when chat_field is None).

    A record left without chat attributes and permissions is deleted.
    """

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
        chat_field: ChatField | None,
    ) -> UserAccount:
        require_login(actor)
        target = await find_target(self._uow_factory, target_name)
        if not is_self(actor, target):
            await require_permission(
                self._permission_checker,
                actor,
                SET_OTHER,
                "You can't modify this player's chat data.",
            )
        node = RESET_ALL if chat_field is None else _FIELD_PERMISSIONS[chat_field]
        await require_permission(self._permission_checker, actor, node)

        def clear(record: OverrideRecord) -> None:
            if chat_field is None:
                record.clear_chat()
            else:
                record.chat.set(chat_field, None)

        try:
            await self._store.modify(target.id, clear)
        except NotFound:
            raise NotFound("This user has no custom chat data.") from None
        return target
