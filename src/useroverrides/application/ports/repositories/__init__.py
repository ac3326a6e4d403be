"""Repository ports."""

from useroverrides.application.ports.repositories.override_repository import (
    OverrideRepository,
)
from useroverrides.application.ports.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "OverrideRepository",
    "UserRepository",
]
