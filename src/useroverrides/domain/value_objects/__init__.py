"""Domain value objects."""

from useroverrides.domain.value_objects.chat_color import ChatColor
from useroverrides.domain.value_objects.chat_display import ChatDisplay
from useroverrides.domain.value_objects.chat_field import ChatField
from useroverrides.domain.value_objects.permission import Permission
from useroverrides.domain.value_objects.permission_result import PermissionResult

__all__ = [
    "ChatColor",
    "ChatDisplay",
    "ChatField",
    "Permission",
    "PermissionResult",
]
