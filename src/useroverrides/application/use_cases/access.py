"""Shared access checks and target lookup for use cases."""

from useroverrides.application.dto.actor import Actor
from useroverrides.application.ports import PermissionChecker, UnitOfWorkFactory
from useroverrides.domain.entities import UserAccount
from useroverrides.domain.exceptions import AmbiguousMatch, NotFound, PermissionDenied

SET_OTHER = "us.setother"
REMOVE_PREFIX = "us.remove.prefix"
REMOVE_SUFFIX = "us.remove.suffix"
REMOVE_COLOR = "us.remove.color"
RESET_ALL = "us.resetall"
PURGE = "us.purge"
RELOAD = "us.reload"
MANAGE_PERMISSIONS = "us.permission"


def require_login(actor: Actor) -> None:
    if not actor.is_console and actor.account is None:
        raise PermissionDenied("You must be logged in to do that.")


async def has_permission(checker: PermissionChecker, actor: Actor, permission: str) -> bool:
    if actor.is_console:
        return True
    if actor.account is None:
        return False
    return await checker.has_permission(actor.account, permission)


async def require_permission(
    checker: PermissionChecker,
    actor: Actor,
    permission: str,
    message: str = "You do not have access to this command.",
) -> None:
    if not await has_permission(checker, actor, permission):
        raise PermissionDenied(message)


def is_self(actor: Actor, target: UserAccount) -> bool:
    return actor.account is not None and actor.account.id == target.id


async def find_target(unit_of_work_factory: UnitOfWorkFactory, name: str) -> UserAccount:
    """Resolve exactly one account by name."""
    async with unit_of_work_factory() as uow:
        matches = await uow.users.find_by_name(name)
    if not matches:
        raise NotFound(f"Could not find a user under the name '{name}'")
    if len(matches) > 1:
        raise AmbiguousMatch(name, matches)
    return matches[0]
