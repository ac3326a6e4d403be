"""Health check endpoints."""

import falcon.asgi

from useroverrides.application.override_store import OverrideStore


class HealthResource:
    """Liveness, and readiness once the override cache is loaded."""

    def __init__(self, store: OverrideStore) -> None:
        self._store = store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - 503 until the first load from storage."""
        if not self._store.is_loaded:
            resp.media = {"status": "loading"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
