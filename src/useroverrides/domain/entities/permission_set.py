"""Permission set - ordered permission entries, unique by name."""

from collections.abc import Iterable, Iterator

from useroverrides.domain.value_objects import Permission
from useroverrides.domain.value_objects.permission import NEGATION_MARK, SEPARATOR


class PermissionSet:
    """Ordered collection of permission entries with one entry per name."""

    def __init__(self, permissions: Iterable[Permission | str] = ()) -> None:
        self._entries: list[Permission] = []
        for permission in permissions:
            self.add(permission)

    def add(self, permission: Permission | str) -> None:
        """Append the entry unless one with the same name is already present."""
        entry = _coerce(permission)
        if entry not in self._entries:
            self._entries.append(entry)

    def remove(self, permission: Permission | str) -> None:
        """Drop every entry named like `permission`, negated or not."""
        name = _coerce(permission).name
        self._entries = [p for p in self._entries if p.name != name]

    def contains(self, name: str | None) -> bool:
        """Blank names are always satisfied; negated queries never match."""
        if name is None or not name.strip():
            return True
        if name.startswith(NEGATION_MARK):
            return False
        return any(p.name == name for p in self._entries)

    def is_negated(self, name: str | None) -> bool:
        if not name:
            return False
        return any(p.name == name and p.negated for p in self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def copy(self) -> "PermissionSet":
        return PermissionSet(self._entries)

    def serialize(self) -> str:
        """Comma-joined `name` / `!name` tokens in insertion order."""
        return SEPARATOR.join(str(p) for p in self._entries)

    @classmethod
    def deserialize(cls, text: str | None) -> "PermissionSet":
        """Inverse of serialize; blank tokens are skipped."""
        if not text:
            return cls()
        return cls(token.strip() for token in text.split(SEPARATOR) if token.strip())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Permission]:
        return iter(list(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionSet):
            return NotImplemented
        return [(p.name, p.negated) for p in self._entries] == [
            (p.name, p.negated) for p in other._entries
        ]

    def __str__(self) -> str:
        return ", ".join(str(p) for p in self._entries)

    def __repr__(self) -> str:
        return f"PermissionSet({self.serialize()!r})"


def _coerce(permission: Permission | str) -> Permission:
    if isinstance(permission, Permission):
        return permission
    return Permission.parse(permission)
