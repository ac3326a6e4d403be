"""Set chat prefix, suffix or color use case."""

from useroverrides.application.dto.actor import Actor
from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import PermissionChecker, UnitOfWorkFactory
from useroverrides.application.use_cases.access import (
    SET_OTHER,
    find_target,
    is_self,
    require_login,
    require_permission,
)
from useroverrides.application.validation import validate_chat_value
from useroverrides.config import ChatConfigLoader
from useroverrides.domain.entities import UserAccount
from useroverrides.domain.value_objects import ChatField


class SetChatFieldUseCase:
    """Set one chat attribute for a user, creating the record on first use."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        store: OverrideStore,
        permission_checker: PermissionChecker,
        config_loader: ChatConfigLoader,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store
        self._permission_checker = permission_checker
        self._config_loader = config_loader

    async def execute(
        self,
        actor: Actor,
        target_name: str,
        chat_field: ChatField,
        value: str,
    ) -> UserAccount:
        """Validate, then store the value. Returns the target account."""
        require_login(actor)
        target = await find_target(self._uow_factory, target_name)
        if not is_self(actor, target):
            await require_permission(
                self._permission_checker,
                actor,
                SET_OTHER,
                f"You do not have permission to change this player's chat {chat_field}.",
            )

        value = validate_chat_value(chat_field, value, self._config_loader.current)

        await self._store.modify(
            target.id,
            lambda record: record.chat.set(chat_field, value),
            create_if_missing=True,
        )
        return target
