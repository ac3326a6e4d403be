"""Mapping of domain errors to HTTP responses."""

import falcon
import falcon.asgi

from useroverrides.domain.entities import OverrideRecord
from useroverrides.domain.exceptions import (
    AmbiguousMatch,
    DuplicateKey,
    InvalidArgument,
    NotFound,
    PermissionDenied,
    StorageFailure,
    UserOverridesError,
)

_STATUS = {
    InvalidArgument: falcon.HTTP_400,
    PermissionDenied: falcon.HTTP_403,
    NotFound: falcon.HTTP_404,
    AmbiguousMatch: falcon.HTTP_409,
    DuplicateKey: falcon.HTTP_409,
    StorageFailure: falcon.HTTP_503,
}


def set_error(resp: falcon.asgi.Response, exc: UserOverridesError) -> None:
    resp.status = _STATUS.get(type(exc), falcon.HTTP_500)
    if isinstance(exc, StorageFailure):
        resp.media = {"error": "Storage failure"}
    else:
        resp.media = {"error": str(exc)}


def require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response) -> bool:
    if getattr(req.context, "user", None):
        return True
    resp.status = falcon.HTTP_401
    resp.media = {"error": "Unauthorized"}
    return False


def record_to_media(record: OverrideRecord) -> dict:
    return {
        "user_id": record.user_id,
        "prefix": record.chat.prefix,
        "suffix": record.chat.suffix,
        "color": record.chat.color,
        "permissions": [str(p) for p in record.permissions],
    }
