"""Override record API resources."""

import falcon.asgi

from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import UnitOfWorkFactory
from useroverrides.application.validation import validate_chat_value
from useroverrides.config import ChatConfigLoader
from useroverrides.domain.entities import ChatData, OverrideRecord, PermissionSet
from useroverrides.domain.exceptions import InvalidArgument, NotFound, UserOverridesError
from useroverrides.domain.resolution import resolve_display, resolve_permission
from useroverrides.domain.value_objects import ChatDisplay, ChatField
from useroverrides.interfaces.api.resources.errors import (
    record_to_media,
    require_user,
    set_error,
)


class OverridesResource:
    """GET /v1/overrides - list every override record."""

    def __init__(self, store: OverrideStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not require_user(req, resp):
            return
        records = await self._store.list()
        resp.media = {"items": [record_to_media(r) for r in records]}
        resp.status = falcon.HTTP_200


class OverrideResource:
    """GET/PUT/DELETE /v1/overrides/{user_id} - one user's override record."""

    def __init__(self, store: OverrideStore, config_loader: ChatConfigLoader) -> None:
        self._store = store
        self._config_loader = config_loader

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        if not require_user(req, resp):
            return
        record = await self._store.get(user_id)
        if record is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Override record not found"}
            return
        resp.media = record_to_media(record)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        """Replace the record. A body without any value deletes it."""
        if not require_user(req, resp):
            return
        body = await req.get_media()
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Expected a JSON object"}
            return

        try:
            record = self._record_from_body(user_id, body)
            if record.is_empty():
                await self._store.remove(user_id)
                resp.status = falcon.HTTP_204
                return
            await self._store.save(record)
        except NotFound:
            resp.status = falcon.HTTP_204
            return
        except UserOverridesError as e:
            set_error(resp, e)
            return

        resp.media = record_to_media(record)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        if not require_user(req, resp):
            return
        try:
            await self._store.remove(user_id)
        except UserOverridesError as e:
            set_error(resp, e)
            return
        resp.status = falcon.HTTP_204

    def _record_from_body(self, user_id: int, body: dict) -> OverrideRecord:
        config = self._config_loader.current
        chat = ChatData()
        for chat_field in ChatField:
            value = body.get(chat_field.value)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidArgument(f"{chat_field} must be a string")
            chat.set(chat_field, validate_chat_value(chat_field, value, config))

        raw_permissions = body.get("permissions") or []
        if not isinstance(raw_permissions, list) or not all(
            isinstance(p, str) for p in raw_permissions
        ):
            raise InvalidArgument("permissions must be a list of strings")
        return OverrideRecord(
            user_id=user_id,
            chat=chat,
            permissions=PermissionSet(raw_permissions),
        )


class ResolveResource:
    """GET /v1/overrides/{user_id}/resolve - effective display and permission."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, store: OverrideStore) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: int
    ) -> None:
        if not require_user(req, resp):
            return
        permission = req.get_param("permission")

        try:
            async with self._uow_factory() as uow:
                account = await uow.users.get_by_id(user_id)
                group = await uow.users.get_group(account.group_name) if account else None
        except UserOverridesError as e:
            set_error(resp, e)
            return
        defaults = group.display if group else ChatDisplay()
        record = await self._store.get(user_id)
        display = resolve_display(record, defaults)

        resp.media = {
            "user_id": user_id,
            "prefix": display.prefix,
            "suffix": display.suffix,
            "color": display.color,
            "permission": permission,
            "result": resolve_permission(record, permission).value,
        }
        resp.status = falcon.HTTP_200
