"""User directory port - read-only view of the host's accounts and groups."""

from typing import Protocol

from useroverrides.domain.entities import Group, UserAccount


class UserRepository(Protocol):
    """Port for host account lookups."""

    async def get_by_id(self, user_id: int) -> UserAccount | None: ...

    async def find_by_name(self, name: str) -> list[UserAccount]: ...

    async def get_group(self, group_name: str) -> Group | None: ...
