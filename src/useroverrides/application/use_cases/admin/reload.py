"""Reload chat config and override cache use case."""

import logging

from useroverrides.application.dto.actor import Actor
from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import PermissionChecker
from useroverrides.application.use_cases.access import RELOAD, require_permission
from useroverrides.config import ChatConfigLoader

logger = logging.getLogger(__name__)


class ReloadUseCase:
    """Re-read the chat config file and reload the store from storage."""

    def __init__(
        self,
        store: OverrideStore,
        config_loader: ChatConfigLoader,
        permission_checker: PermissionChecker,
    ) -> None:
        self._store = store
        self._config_loader = config_loader
        self._permission_checker = permission_checker

    async def execute(self, actor: Actor) -> int:
        """Returns the number of records loaded."""
        await require_permission(self._permission_checker, actor, RELOAD)
        self._config_loader.reload()
        count = await self._store.load()
        logger.info("Reload requested by %s", actor.account.name if actor.account else "console")
        return count
