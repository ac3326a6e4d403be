"""Permission override API resources."""

import falcon.asgi

from useroverrides.application.override_store import OverrideStore
from useroverrides.domain.entities import OverrideRecord
from useroverrides.domain.exceptions import InvalidArgument, NotFound, UserOverridesError
from useroverrides.domain.value_objects import Permission
from useroverrides.interfaces.api.resources.errors import require_user, set_error


class PermissionsResource:
    """GET/POST /v1/overrides/{user_id}/permissions - list and add permissions."""

    def __init__(self, store: OverrideStore) -> None:
        self._store = store

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        """List permission overrides for user."""
        if not require_user(req, resp):
            return
        record = await self._store.get(user_id)
        items = [
            {"name": p.name, "negated": p.negated}
            for p in (record.permissions if record else [])
        ]
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        """Add permissions (`name` or `!name`); existing names are kept."""
        if not require_user(req, resp):
            return
        try:
            body = await req.get_media()
            raw = body["permissions"]
        except (KeyError, TypeError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            if not isinstance(raw, list) or not raw:
                raise InvalidArgument("permissions must be a non-empty list")
            parsed = [Permission.parse(p) for p in raw]

            def grant(record: OverrideRecord) -> None:
                for permission in parsed:
                    record.permissions.add(permission)

            record = await self._store.modify(user_id, grant, create_if_missing=True)
        except UserOverridesError as e:
            set_error(resp, e)
            return

        resp.media = {"items": [str(p) for p in record.permissions]}
        resp.status = falcon.HTTP_201


class PermissionResource:
    """DELETE /v1/overrides/{user_id}/permissions/{name} - remove one permission."""

    def __init__(self, store: OverrideStore) -> None:
        self._store = store

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
        name: str,
    ) -> None:
        if not require_user(req, resp):
            return
        try:
            permission = Permission.parse(name)
            await self._store.modify(user_id, lambda record: _revoke(record, permission))
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Permission not found"}
            return
        except UserOverridesError as e:
            set_error(resp, e)
            return
        resp.status = falcon.HTTP_204


def _revoke(record: OverrideRecord, permission: Permission) -> None:
    if not record.permissions.contains(permission.name):
        raise NotFound("Permission not found")
    record.permissions.remove(permission)
