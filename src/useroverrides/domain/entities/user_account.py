"""User account entity, owned by the host server."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserAccount:
    """Registered account - id, login name and group."""

    id: int
    name: str
    group_name: str
