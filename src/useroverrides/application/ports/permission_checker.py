"""Permission checker port - may an account use a command node."""

from typing import Protocol

from useroverrides.domain.entities import UserAccount


class PermissionChecker(Protocol):
    """Port for checking an account's effective permissions."""

    async def has_permission(self, account: UserAccount, permission: str) -> bool: ...
