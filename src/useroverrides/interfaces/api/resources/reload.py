"""Reload API resource."""

import falcon.asgi

from useroverrides.application.dto.actor import Actor
from useroverrides.application.use_cases.admin.reload import ReloadUseCase
from useroverrides.domain.exceptions import UserOverridesError
from useroverrides.interfaces.api.resources.errors import require_user, set_error


class ReloadResource:
    """POST /v1/reload - re-read the chat config and reload the override cache."""

    def __init__(self, reload: ReloadUseCase) -> None:
        self._reload = reload

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not require_user(req, resp):
            return
        try:
            count = await self._reload.execute(Actor.console())
        except UserOverridesError as e:
            set_error(resp, e)
            return
        resp.media = {"records": count}
        resp.status = falcon.HTTP_200
