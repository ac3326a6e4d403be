"""Host event hooks - entry points a server adapter calls from its own events."""

import logging

from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import UnitOfWorkFactory
from useroverrides.application.session_cache import SessionCache
from useroverrides.domain.entities import UserAccount
from useroverrides.domain.exceptions import NotFound
from useroverrides.domain.resolution import resolve_display, resolve_permission
from useroverrides.domain.value_objects import ChatDisplay, PermissionResult

logger = logging.getLogger(__name__)


class OverrideHooks:
    """Session lifecycle, chat and permission hooks backed by the store."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        store: OverrideStore,
        sessions: SessionCache,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store
        self._sessions = sessions

    async def on_login(self, session_id: str, account: UserAccount) -> None:
        await self._sessions.attach(session_id, account.id)

    def on_logout(self, session_id: str) -> None:
        self._sessions.detach(session_id)

    async def on_chat(self, session_id: str, account: UserAccount) -> ChatDisplay:
        """Effective prefix, suffix and color for a chat line from this session."""
        async with self._uow_factory() as uow:
            group = await uow.users.get_group(account.group_name)
        defaults = group.display if group else ChatDisplay()
        return resolve_display(self._sessions.get(session_id), defaults)

    def on_permission(self, session_id: str, permission: str) -> PermissionResult:
        return resolve_permission(self._sessions.get(session_id), permission)

    async def on_account_deleted(self, user_id: int) -> None:
        try:
            await self._store.remove(user_id)
        except NotFound:
            return
        logger.info("Removed overrides of deleted account %d", user_id)
