"""Permission entry - a grant or an explicit denial of one permission name."""

from dataclasses import dataclass, field

from useroverrides.domain.exceptions import InvalidArgument

NEGATION_MARK = "!"
SEPARATOR = ","


@dataclass(frozen=True)
class Permission:
    """Permission name with a negation flag.

    Equality and hashing look at the name only: a permission and its negation
    are exclusive states of the same name, so a set never holds both.
    """

    name: str
    negated: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidArgument("Permission name cannot be empty")
        if self.name.startswith(NEGATION_MARK):
            raise InvalidArgument(f"Permission name cannot start with '{NEGATION_MARK}'")
        if self.name != self.name.strip():
            raise InvalidArgument("Permission name cannot start or end with whitespace")
        if SEPARATOR in self.name:
            raise InvalidArgument(f"Permission name cannot contain '{SEPARATOR}'")

    @classmethod
    def parse(cls, raw: str | None) -> "Permission":
        """Parse `name` or `!name`."""
        if raw is None:
            raise InvalidArgument("Permission name cannot be empty")
        if raw.startswith(NEGATION_MARK):
            return cls(name=raw[1:], negated=True)
        return cls(name=raw)

    def __str__(self) -> str:
        return f"{NEGATION_MARK}{self.name}" if self.negated else self.name
