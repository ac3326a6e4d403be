"""Domain entities."""

from useroverrides.domain.entities.group import Group
from useroverrides.domain.entities.override_record import ChatData, OverrideRecord
from useroverrides.domain.entities.permission_set import PermissionSet
from useroverrides.domain.entities.user_account import UserAccount

__all__ = [
    "ChatData",
    "Group",
    "OverrideRecord",
    "PermissionSet",
    "UserAccount",
]
