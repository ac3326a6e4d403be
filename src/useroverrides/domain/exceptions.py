"""Domain exceptions."""


class UserOverridesError(Exception):
    """Base exception for user overrides."""

    pass


class InvalidArgument(UserOverridesError):
    """Input failed validation (color format, tag length, empty permission name)."""

    pass


class NotFound(UserOverridesError):
    """Requested user or override record was not found."""

    pass


class AmbiguousMatch(UserOverridesError):
    """More than one user account matched a name query."""

    def __init__(self, query: str, matches: list) -> None:
        self.query = query
        self.matches = list(matches)
        names = ", ".join(m.name for m in self.matches)
        super().__init__(f"More than one user matched '{query}': {names}")


class DuplicateKey(UserOverridesError):
    """An override record already exists for the user."""

    pass


class PermissionDenied(UserOverridesError):
    """Caller does not have permission for the requested action."""

    pass


class StorageFailure(UserOverridesError):
    """A storage transaction failed and was rolled back."""

    pass
