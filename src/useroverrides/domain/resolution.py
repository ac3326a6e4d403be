"""Resolution of effective chat display and permission decisions."""

from useroverrides.domain.entities import OverrideRecord
from useroverrides.domain.value_objects import ChatDisplay, PermissionResult


def resolve_display(record: OverrideRecord | None, defaults: ChatDisplay) -> ChatDisplay:
    """Per field: the user's value when set, else the group default."""
    if record is None:
        return defaults
    chat = record.chat
    return ChatDisplay(
        prefix=chat.prefix if chat.prefix is not None else defaults.prefix,
        suffix=chat.suffix if chat.suffix is not None else defaults.suffix,
        color=chat.color if chat.color is not None else defaults.color,
    )


def resolve_permission(record: OverrideRecord | None, name: str | None) -> PermissionResult:
    """Override decision for `name`.

    Containment is checked before negation: a blank name is contained in every
    set but never negated, so it resolves to GRANTED.
    """
    if record is None or not record.permissions.contains(name):
        return PermissionResult.UNHANDLED
    if record.permissions.is_negated(name):
        return PermissionResult.DENIED
    return PermissionResult.GRANTED
