"""Effective chat display values."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChatDisplay:
    """Prefix, suffix and color used to render a chat line."""

    prefix: str | None = None
    suffix: str | None = None
    color: str | None = None
