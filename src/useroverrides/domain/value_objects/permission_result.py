"""Outcome of a per-user permission lookup."""

from enum import StrEnum


class PermissionResult(StrEnum):
    """Granted and denied override the host; unhandled defers to it."""

    GRANTED = "granted"
    DENIED = "denied"
    UNHANDLED = "unhandled"
