"""Auth middleware - checks the admin bearer token."""

import secrets
from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    With no token configured every request is treated as the anonymous admin
    (development setups only).
    """

    def __init__(self, api_token: str = "") -> None:
        self._api_token = api_token

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        if not self._api_token:
            req.context.user = RequestUser(user_id="anonymous")
            return
        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer ") and secrets.compare_digest(
            auth[7:], self._api_token
        ):
            req.context.user = RequestUser(user_id="admin")
        else:
            req.context.user = None
