"""Group entity, owned by the host server."""

from dataclasses import dataclass, field

from useroverrides.domain.value_objects import ChatDisplay


@dataclass
class Group:
    """Permission group with default chat display values."""

    name: str
    prefix: str | None = None
    suffix: str | None = None
    color: str | None = None
    permissions: list[str] = field(default_factory=list)

    @property
    def display(self) -> ChatDisplay:
        return ChatDisplay(prefix=self.prefix, suffix=self.suffix, color=self.color)

    def has_permission(self, name: str) -> bool:
        """Group grant check: `!name` denies, `*` grants everything else."""
        if f"!{name}" in self.permissions:
            return False
        return name in self.permissions or "*" in self.permissions
