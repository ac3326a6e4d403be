"""Unit tests for OverrideRecord and ChatData."""

import pytest

from useroverrides.domain.entities import ChatData, OverrideRecord, PermissionSet
from useroverrides.domain.exceptions import InvalidArgument
from useroverrides.domain.value_objects import ChatField


def test_chat_data_get_set() -> None:
    chat = ChatData()
    chat.set(ChatField.PREFIX, "[Boss]")
    assert chat.get(ChatField.PREFIX) == "[Boss]"
    assert chat.get(ChatField.SUFFIX) is None
    assert chat.is_empty() is False


@pytest.mark.parametrize("user_id", [0, -1, True, "5", None])
def test_rejects_invalid_user_id(user_id) -> None:
    """User id must be a positive integer."""
    with pytest.raises(InvalidArgument):
        OverrideRecord(user_id=user_id, chat=ChatData())


def test_rejects_missing_chat_data() -> None:
    with pytest.raises(InvalidArgument):
        OverrideRecord(user_id=1, chat=None)


def test_is_empty() -> None:
    """Empty means no chat attribute and no permission entry."""
    record = OverrideRecord(user_id=1, chat=ChatData())
    assert record.is_empty() is True

    record.permissions.add("a")
    assert record.is_empty() is False

    record.permissions.clear()
    record.chat.color = "1,2,3"
    assert record.is_empty() is False


def test_clear_keeps_permissions_when_asked() -> None:
    record = OverrideRecord(
        user_id=1, chat=ChatData(prefix="p", suffix="s"), permissions=PermissionSet(["a"])
    )
    record.clear(include_permissions=False)

    assert record.chat.is_empty()
    assert record.permissions.serialize() == "a"

    record.clear()
    assert record.is_empty()


def test_copy_is_deep() -> None:
    """Mutating a copy leaves chat data and permissions of the original untouched."""
    record = OverrideRecord(user_id=1, chat=ChatData(prefix="p"), permissions=PermissionSet(["a"]))
    copied = record.copy()
    copied.chat.prefix = "q"
    copied.permissions.add("b")

    assert record.chat.prefix == "p"
    assert record.permissions.serialize() == "a"
    assert copied == OverrideRecord(
        user_id=1, chat=ChatData(prefix="q"), permissions=PermissionSet(["a", "b"])
    )
