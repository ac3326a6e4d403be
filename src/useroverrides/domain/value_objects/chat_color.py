"""Chat color in "R,G,B" form."""

from dataclasses import dataclass

from useroverrides.domain.exceptions import InvalidArgument


@dataclass(frozen=True)
class ChatColor:
    """RGB chat color, each component a byte."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise InvalidArgument("Color components must be between 0 and 255")

    @classmethod
    def parse(cls, value: str | None) -> "ChatColor":
        """Parse "R,G,B"; raise InvalidArgument on anything else."""
        if value is None:
            raise InvalidArgument("Invalid color format! Expected R,G,B")
        parts = [p.strip() for p in value.split(",")]
        if len(parts) != 3 or not all(p.isdecimal() for p in parts):
            raise InvalidArgument("Invalid color format! Expected R,G,B")
        return cls(*(int(p) for p in parts))

    def __str__(self) -> str:
        return f"{self.r},{self.g},{self.b}"
