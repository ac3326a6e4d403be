"""Chat command handler - `us` and `permission` commands.

A host adapter passes the raw command line and the calling actor; the handler
answers with replies for the caller. Domain errors never escape: they become
error replies.
"""

import shlex
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum

from useroverrides.application.dto.actor import Actor
from useroverrides.application.use_cases.admin.reload import ReloadUseCase
from useroverrides.application.use_cases.chat.purge_empty_records import (
    PurgeEmptyRecordsUseCase,
)
from useroverrides.application.use_cases.chat.read_chat_data import ReadChatDataUseCase
from useroverrides.application.use_cases.chat.remove_chat_data import RemoveChatDataUseCase
from useroverrides.application.use_cases.chat.set_chat_field import SetChatFieldUseCase
from useroverrides.application.use_cases.permission.add_permissions import (
    AddPermissionsUseCase,
)
from useroverrides.application.use_cases.permission.list_permissions import (
    ListPermissionsUseCase,
)
from useroverrides.application.use_cases.permission.remove_permissions import (
    RemovePermissionsUseCase,
)
from useroverrides.domain.exceptions import StorageFailure, UserOverridesError
from useroverrides.domain.value_objects import ChatField

SPECIFIER = "/"

US_HELP = {
    "prefix": "Sets the player's chat prefix",
    "suffix": "Sets the player's chat suffix",
    "color": "Sets the player's chat color",
    "remove": "Removes the player's (pre/suf)fix or chat color, or all of them",
    "read": "Outputs the player's chat information",
    "purge": "Removes all empty entries from the database",
    "reload": "Reloads the config file and the override cache",
}

_REMOVE_TARGETS = {
    "prefix": ChatField.PREFIX,
    "suffix": ChatField.SUFFIX,
    "color": ChatField.COLOR,
    "colour": ChatField.COLOR,
    "all": None,
}


class ReplyKind(StrEnum):
    """How the host should style a reply."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Reply:
    """One line sent back to the caller."""

    kind: ReplyKind
    text: str


def success(text: str) -> Reply:
    return Reply(ReplyKind.SUCCESS, text)


def error(text: str) -> Reply:
    return Reply(ReplyKind.ERROR, text)


def info(text: str) -> Reply:
    return Reply(ReplyKind.INFO, text)


class CommandHandler:
    """Parses command lines and runs the matching use case."""

    def __init__(
        self,
        set_chat_field: SetChatFieldUseCase,
        remove_chat_data: RemoveChatDataUseCase,
        read_chat_data: ReadChatDataUseCase,
        purge_empty_records: PurgeEmptyRecordsUseCase,
        add_permissions: AddPermissionsUseCase,
        remove_permissions: RemovePermissionsUseCase,
        list_permissions: ListPermissionsUseCase,
        reload: ReloadUseCase,
    ) -> None:
        self._set_chat_field = set_chat_field
        self._remove_chat_data = remove_chat_data
        self._read_chat_data = read_chat_data
        self._purge = purge_empty_records
        self._add_permissions = add_permissions
        self._remove_permissions = remove_permissions
        self._list_permissions = list_permissions
        self._reload = reload

    async def dispatch(self, actor: Actor, line: str) -> list[Reply]:
        """Run a full command line such as `/us prefix Bob "[Boss]"`."""
        try:
            args = shlex.split(line)
        except ValueError:
            return [error("Invalid syntax! Unbalanced quotes.")]
        if not args:
            return []

        command = args[0].removeprefix(SPECIFIER).lower()
        if command == "us":
            return await self._guard(self._handle_us(actor, args[1:]))
        if command == "permission":
            return await self._guard(self._handle_permission(actor, args[1:]))
        return [error(f"Invalid command '{args[0]}'.")]

    async def _guard(self, pending: Awaitable[list[Reply]]) -> list[Reply]:
        try:
            return await pending
        except StorageFailure:
            return [error("Could not save the changes. Check the server log for details.")]
        except UserOverridesError as e:
            return [error(str(e))]

    async def _handle_us(self, actor: Actor, params: list[str]) -> list[Reply]:
        if not params or params[0].lower() == "help":
            return self._us_help(params[1:])

        handlers: dict[str, Callable[[Actor, list[str]], Awaitable[list[Reply]]]] = {
            "prefix": self._set_prefix,
            "suffix": self._set_suffix,
            "color": self._set_color,
            "colour": self._set_color,
            "remove": self._remove,
            "read": self._read,
            "purge": self._purge_records,
            "reload": self._reload_all,
        }
        handler = handlers.get(params[0].lower())
        if handler is None:
            return self._us_help([])
        return await handler(actor, params[1:])

    def _us_help(self, params: list[str]) -> list[Reply]:
        if params:
            description = US_HELP.get(params[0].lower())
            if description is None:
                return [error("Invalid sub-command name provided.")]
            return [info(f"Sub-command: {params[0].lower()}"), info(f"Help: {description}")]
        return [info("User overrides sub-commands:")] + [
            info(f"{name} - {text}") for name, text in US_HELP.items()
        ]

    async def _set_prefix(self, actor: Actor, params: list[str]) -> list[Reply]:
        if len(params) < 2:
            return [error(f"Invalid syntax! Proper syntax: {SPECIFIER}us prefix <player name> <prefix>")]
        target = await self._set_chat_field.execute(
            actor, params[0], ChatField.PREFIX, " ".join(params[1:])
        )
        return [success(f"Modified {target.name}'s chat data successfully.")]

    async def _set_suffix(self, actor: Actor, params: list[str]) -> list[Reply]:
        if len(params) < 2:
            return [error(f"Invalid syntax! Proper syntax: {SPECIFIER}us suffix <player name> <suffix>")]
        target = await self._set_chat_field.execute(
            actor, params[0], ChatField.SUFFIX, " ".join(params[1:])
        )
        return [success(f"Modified {target.name}'s chat data successfully.")]

    async def _set_color(self, actor: Actor, params: list[str]) -> list[Reply]:
        if len(params) != 2:
            return [error(f"Invalid syntax! Proper syntax: {SPECIFIER}us color <player name> <r,g,b>")]
        target = await self._set_chat_field.execute(actor, params[0], ChatField.COLOR, params[1])
        return [success(f"Modified {target.name}'s chat data successfully.")]

    async def _remove(self, actor: Actor, params: list[str]) -> list[Reply]:
        if len(params) != 2 or params[1].lower() not in _REMOVE_TARGETS:
            return [
                error(
                    f"Invalid syntax! Proper syntax: {SPECIFIER}us remove <player name> "
                    "<prefix/suffix/color/all>"
                )
            ]
        target = await self._remove_chat_data.execute(
            actor, params[0], _REMOVE_TARGETS[params[1].lower()]
        )
        return [success(f"Modified {target.name}'s chat data successfully.")]

    async def _read(self, actor: Actor, params: list[str]) -> list[Reply]:
        if len(params) != 1:
            return [error(f"Invalid syntax! Proper syntax: {SPECIFIER}us read <player name>")]
        target, record = await self._read_chat_data.execute(params[0])
        return [
            info(f"Username: {target.name}"),
            info(f"  * Prefix: {record.chat.prefix or 'None'}"),
            info(f"  * Suffix: {record.chat.suffix or 'None'}"),
            info(f"  * Chat color: {record.chat.color or 'None'}"),
        ]

    async def _purge_records(self, actor: Actor, params: list[str]) -> list[Reply]:
        count = await self._purge.execute(actor)
        return [success(f"Removed {count} empty entries.")]

    async def _reload_all(self, actor: Actor, params: list[str]) -> list[Reply]:
        count = await self._reload.execute(actor)
        return [success(f"Reloaded the config file and {count} override records.")]

    async def _handle_permission(self, actor: Actor, params: list[str]) -> list[Reply]:
        sub = params[0].lower() if params else ""
        if sub == "add":
            if len(params) < 3:
                return [error(f"Invalid syntax! Proper syntax: {SPECIFIER}permission add <player name> <permissions>")]
            target, _ = await self._add_permissions.execute(actor, params[1], params[2:])
            return [success(f"Modified {target.name}'s permissions successfully.")]
        if sub in ("del", "rem", "delete", "remove"):
            if len(params) < 3:
                return [error(f"Invalid syntax! Proper syntax: {SPECIFIER}permission remove <player name> <permissions>")]
            target = await self._remove_permissions.execute(actor, params[1], params[2:])
            return [success(f"Modified {target.name}'s permissions successfully.")]
        if sub == "list":
            if len(params) != 2:
                return [error(f"Invalid syntax! Proper syntax: {SPECIFIER}permission list <player name>")]
            target, permissions = await self._list_permissions.execute(actor, params[1])
            return [success(f"{target.name}'s permissions:"), info(str(permissions))]

        return [
            error("Invalid syntax! Proper syntax:"),
            error(f"{SPECIFIER}permission add <player name> <permissions>"),
            error(f"{SPECIFIER}permission remove <player name> <permissions>"),
            error(f"{SPECIFIER}permission list <player name>"),
        ]
