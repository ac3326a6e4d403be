"""Override record - one user's chat customization and permission overrides."""

from dataclasses import dataclass, field

from useroverrides.domain.entities.permission_set import PermissionSet
from useroverrides.domain.exceptions import InvalidArgument
from useroverrides.domain.value_objects import ChatField


@dataclass
class ChatData:
    """Optional chat display attributes. Values are stored as given."""

    prefix: str | None = None
    suffix: str | None = None
    color: str | None = None

    def get(self, chat_field: ChatField) -> str | None:
        return getattr(self, chat_field.value)

    def set(self, chat_field: ChatField, value: str | None) -> None:
        setattr(self, chat_field.value, value)

    def is_empty(self) -> bool:
        return self.prefix is None and self.suffix is None and self.color is None


@dataclass
class OverrideRecord:
    """Override record - user (by account id) with chat data and permission set."""

    user_id: int
    chat: ChatData
    permissions: PermissionSet = field(default_factory=PermissionSet)

    def __post_init__(self) -> None:
        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int) or self.user_id <= 0:
            raise InvalidArgument(f"Invalid user id: {self.user_id!r}")
        if self.chat is None:
            raise InvalidArgument("Chat data is required")

    def clear_chat(self) -> None:
        self.chat = ChatData()

    def clear(self, include_permissions: bool = True) -> None:
        self.clear_chat()
        if include_permissions:
            self.permissions.clear()

    def is_empty(self) -> bool:
        """No display attribute set and no permission entries."""
        return self.chat.is_empty() and len(self.permissions) == 0

    def copy(self) -> "OverrideRecord":
        return OverrideRecord(
            user_id=self.user_id,
            chat=ChatData(self.chat.prefix, self.chat.suffix, self.chat.color),
            permissions=self.permissions.copy(),
        )
