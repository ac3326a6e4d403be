"""Validation of user supplied chat values against the chat config."""

from useroverrides.config import ChatConfig
from useroverrides.domain.exceptions import InvalidArgument
from useroverrides.domain.value_objects import ChatColor, ChatField


def prohibited_words_in(value: str, config: ChatConfig) -> list[str]:
    lowered = value.lower()
    return [w for w in config.prohibited_words if w and w.lower() in lowered]


def validate_chat_value(chat_field: ChatField, value: str, config: ChatConfig) -> str:
    """Return the value to store, or raise InvalidArgument."""
    if chat_field is ChatField.COLOR:
        return str(ChatColor.parse(value))

    limit = (
        config.maximum_prefix_length
        if chat_field is ChatField.PREFIX
        else config.maximum_suffix_length
    )
    if len(value) > limit:
        raise InvalidArgument(f"Your {chat_field} cannot be longer than {limit} characters.")
    found = prohibited_words_in(value, config)
    if found:
        raise InvalidArgument(
            f"Your chat {chat_field} cannot contain the following word(s): {', '.join(found)}"
        )
    return value
