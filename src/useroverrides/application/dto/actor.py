"""Actor DTO - who is invoking a use case."""

from dataclasses import dataclass

from useroverrides.domain.entities import UserAccount


@dataclass(frozen=True)
class Actor:
    """Logged-in account, anonymous player (account=None) or the server console."""

    account: UserAccount | None = None
    is_console: bool = False

    @classmethod
    def console(cls) -> "Actor":
        return cls(is_console=True)
