"""Fixtures for API tests."""

from pathlib import Path

import falcon.asgi
import pytest

from useroverrides.config import Settings
from useroverrides.interfaces.api.app import create_app
from useroverrides.interfaces.api.middleware.auth import RequestUser
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
from useroverrides.main import build_services


class AuthBypassMiddleware:
    """Middleware that sets context.user for testing."""

    async def process_request(self, req, resp):
        req.context.user = RequestUser(user_id="test-admin")


@pytest.fixture
def services(uow_factory, tmp_path: Path):
    settings = Settings(_env_file=None, chat_config_path=tmp_path / "useroverrides.json")
    return build_services(uow_factory, settings)


def build_app(services, uow_factory, middleware: list) -> falcon.asgi.App:
    return create_app(
        overrides_resource=OverridesResource(services.store),
        override_resource=OverrideResource(services.store, services.config_loader),
        resolve_resource=ResolveResource(uow_factory, services.store),
        permissions_resource=PermissionsResource(services.store),
        permission_resource=PermissionResource(services.store),
        reload_resource=ReloadResource(services.reload),
        health_resource=HealthResource(services.store),
        middleware=middleware,
    )


@pytest.fixture
def app(services, uow_factory):
    """Falcon ASGI app with API resources for testing."""
    return build_app(services, uow_factory, [AuthBypassMiddleware()])


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
