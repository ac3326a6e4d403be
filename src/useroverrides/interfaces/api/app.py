"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

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


def create_app(
    overrides_resource: OverridesResource,
    override_resource: OverrideResource,
    resolve_resource: ResolveResource,
    permissions_resource: PermissionsResource,
    permission_resource: PermissionResource,
    reload_resource: ReloadResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/overrides", overrides_resource)
    app.add_route("/v1/overrides/{user_id:int}", override_resource)
    app.add_route("/v1/overrides/{user_id:int}/resolve", resolve_resource)
    app.add_route("/v1/overrides/{user_id:int}/permissions", permissions_resource)
    app.add_route("/v1/overrides/{user_id:int}/permissions/{name}", permission_resource)
    app.add_route("/v1/reload", reload_resource)
    return app
