"""Application entry point and composition root."""

import logging
from dataclasses import dataclass

from falcon.asgi import App

from useroverrides import __version__
from useroverrides.application.override_store import OverrideStore
from useroverrides.application.session_cache import SessionCache
from useroverrides.application.use_cases.admin.reload import ReloadUseCase
from useroverrides.application.use_cases.chat.purge_empty_records import (
    PurgeEmptyRecordsUseCase,
)
from useroverrides.application.use_cases.chat.read_chat_data import ReadChatDataUseCase
from useroverrides.application.use_cases.chat.remove_chat_data import RemoveChatDataUseCase
from useroverrides.application.use_cases.chat.set_chat_field import SetChatFieldUseCase
from useroverrides.application.use_cases.permission.add_permissions import (
    AddPermissionsUseCase,
)
from useroverrides.application.use_cases.permission.list_permissions import (
    ListPermissionsUseCase,
)
from useroverrides.application.use_cases.permission.remove_permissions import (
    RemovePermissionsUseCase,
)
from useroverrides.config import ChatConfigLoader, Settings, get_settings
from useroverrides.infrastructure.permission.permission_checker import (
    OverridePermissionChecker,
)
from useroverrides.infrastructure.persistence.postgres.connection import create_pool
from useroverrides.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from useroverrides.interfaces.api.app import create_app
from useroverrides.interfaces.api.middleware.auth import AuthMiddleware
from useroverrides.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from useroverrides.interfaces.api.resources.health import HealthResource
from useroverrides.interfaces.api.resources.overrides import (
    OverrideResource,
    OverridesResource,
    ResolveResource,
)
from useroverrides.interfaces.api.resources.permissions import (
    PermissionResource,
    PermissionsResource,
)
from useroverrides.interfaces.api.resources.reload import ReloadResource
from useroverrides.interfaces.commands.handler import CommandHandler
from useroverrides.interfaces.hooks import OverrideHooks

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


@dataclass
class Services:
    """Everything a host adapter needs, wired together."""

    store: OverrideStore
    sessions: SessionCache
    config_loader: ChatConfigLoader
    commands: CommandHandler
    hooks: OverrideHooks
    reload: ReloadUseCase


def build_services(uow_factory, settings: Settings) -> Services:
    """Wire store, session cache, use cases, command handler and hooks."""
    store = OverrideStore(uow_factory)
    sessions = SessionCache(store)
    config_loader = ChatConfigLoader(settings.chat_config_path)
    permission_checker = OverridePermissionChecker(uow_factory, store)

    reload = ReloadUseCase(store, config_loader, permission_checker)
    commands = CommandHandler(
        set_chat_field=SetChatFieldUseCase(uow_factory, store, permission_checker, config_loader),
        remove_chat_data=RemoveChatDataUseCase(uow_factory, store, permission_checker),
        read_chat_data=ReadChatDataUseCase(uow_factory, store),
        purge_empty_records=PurgeEmptyRecordsUseCase(store, permission_checker),
        add_permissions=AddPermissionsUseCase(uow_factory, store, permission_checker),
        remove_permissions=RemovePermissionsUseCase(uow_factory, store, permission_checker),
        list_permissions=ListPermissionsUseCase(uow_factory, store, permission_checker),
        reload=reload,
    )
    hooks = OverrideHooks(uow_factory, store, sessions)
    return Services(
        store=store,
        sessions=sessions,
        config_loader=config_loader,
        commands=commands,
        hooks=hooks,
        reload=reload,
    )


def create_useroverrides_app() -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)
    services = build_services(uow_factory, settings)

    if not settings.api_token:
        logger.warning("No API token configured, admin API is open")

    return create_app(
        overrides_resource=OverridesResource(services.store),
        override_resource=OverrideResource(services.store, services.config_loader),
        resolve_resource=ResolveResource(uow_factory, services.store),
        permissions_resource=PermissionsResource(services.store),
        permission_resource=PermissionResource(services.store),
        reload_resource=ReloadResource(services.reload),
        health_resource=HealthResource(services.store),
        middleware=[
            PoolLifespanMiddleware(pool, services.store),
            AuthMiddleware(settings.api_token),
        ],
    )


def main() -> None:
    """CLI entry point - serve the admin API."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("user-overrides v%s", __version__)
    uvicorn.run(
        create_useroverrides_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
