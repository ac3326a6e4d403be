"""PostgreSQL user repository - reads the host's account and group tables."""

from psycopg import AsyncConnection

from useroverrides.domain.entities import Group, UserAccount


def _prefix_pattern(name: str) -> str:
    """ILIKE pattern matching names that start with `name` literally."""
    escaped = name.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped + "%"


def _split_commands(commands: str | None) -> list[str]:
    """group_list.commands is a comma-separated list of permission nodes."""
    return [c.strip() for c in (commands or "").split(",") if c.strip()]


class PostgresUserRepository:
    """Read-only access to users(id, username, usergroup) and group_list."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: int) -> UserAccount | None:
        """Get account by id."""
        cur = await self._conn.execute(
            "SELECT id, username, usergroup FROM users WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return UserAccount(id=r[0], name=r[1], group_name=r[2])

    async def find_by_name(self, name: str) -> list[UserAccount]:
        """Exact (case-insensitive) match wins; otherwise every name starting with `name`."""
        cur = await self._conn.execute(
            "SELECT id, username, usergroup FROM users WHERE lower(username) = lower(%s)",
            (name,),
        )
        rows = await cur.fetchall()
        if not rows:
            cur = await self._conn.execute(
                "SELECT id, username, usergroup FROM users WHERE username ILIKE %s ORDER BY id",
                (_prefix_pattern(name),),
            )
            rows = await cur.fetchall()
        return [UserAccount(id=r[0], name=r[1], group_name=r[2]) for r in rows]

    async def get_group(self, group_name: str) -> Group | None:
        """Get group with chat defaults and comma-separated permission list."""
        cur = await self._conn.execute(
            "SELECT groupname, prefix, suffix, chatcolor, commands FROM group_list WHERE groupname = %s",
            (group_name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Group(
            name=r[0],
            prefix=r[1] or None,
            suffix=r[2] or None,
            color=r[3] or None,
            permissions=_split_commands(r[4]),
        )
