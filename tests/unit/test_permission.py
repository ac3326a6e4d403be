"""Unit tests for Permission value object."""

import pytest

from useroverrides.domain.exceptions import InvalidArgument
from useroverrides.domain.value_objects import Permission


def test_parse_plain_name() -> None:
    """Plain name parses to a granted permission."""
    permission = Permission.parse("tshock.tp")
    assert permission.name == "tshock.tp"
    assert permission.negated is False
    assert str(permission) == "tshock.tp"


def test_parse_negated_name() -> None:
    """Leading '!' marks the permission as negated."""
    permission = Permission.parse("!tshock.tp")
    assert permission.name == "tshock.tp"
    assert permission.negated is True
    assert str(permission) == "!tshock.tp"


def test_equality_ignores_negation() -> None:
    """A permission and its negation compare and hash equal."""
    assert Permission("a") == Permission("a", negated=True)
    assert hash(Permission("a")) == hash(Permission("a", negated=True))
    assert Permission("a") != Permission("b")


@pytest.mark.parametrize("raw", [None, "", "   ", "!", "!!x"])
def test_parse_rejects_invalid(raw) -> None:
    """Blank names, a bare '!' and a double negation are rejected."""
    with pytest.raises(InvalidArgument):
        Permission.parse(raw)


def test_permission_is_immutable() -> None:
    """Permission is frozen."""
    permission = Permission("a")
    with pytest.raises(AttributeError):
        permission.name = "b"


@pytest.mark.parametrize("name", ["a,b", " a", "a ", "a\t"])
def test_names_that_cannot_be_stored_are_rejected(name) -> None:
    """A separator or surrounding whitespace would not survive serialization."""
    with pytest.raises(InvalidArgument):
        Permission(name)


@pytest.mark.parametrize("raw", ["a,b", "! x", "!a,b"])
def test_parse_rejects_unstorable_names(raw) -> None:
    with pytest.raises(InvalidArgument):
        Permission.parse(raw)
