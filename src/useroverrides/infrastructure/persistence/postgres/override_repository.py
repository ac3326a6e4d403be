"""PostgreSQL override repository implementation."""

from psycopg import AsyncConnection

from useroverrides.domain.entities import ChatData, OverrideRecord, PermissionSet
from useroverrides.domain.value_objects import Permission


class PostgresOverrideRepository:
    """Override records stored in chat_override and permission_override."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[OverrideRecord]:
        """Load every record with its permissions."""
        cur = await self._conn.execute(
            "SELECT user_id, prefix, suffix, color FROM chat_override ORDER BY user_id"
        )
        rows = await cur.fetchall()
        cur = await self._conn.execute(
            "SELECT user_id, name, negated FROM permission_override ORDER BY user_id, position"
        )
        perm_rows = await cur.fetchall()

        permissions: dict[int, PermissionSet] = {}
        for user_id, name, negated in perm_rows:
            permissions.setdefault(user_id, PermissionSet()).add(
                Permission(name=name, negated=negated)
            )
        return [
            OverrideRecord(
                user_id=r[0],
                chat=ChatData(prefix=r[1], suffix=r[2], color=r[3]),
                permissions=permissions.get(r[0], PermissionSet()),
            )
            for r in rows
        ]

    async def get(self, user_id: int) -> OverrideRecord | None:
        """Get record by user id."""
        cur = await self._conn.execute(
            "SELECT user_id, prefix, suffix, color FROM chat_override WHERE user_id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        cur = await self._conn.execute(
            "SELECT name, negated FROM permission_override WHERE user_id = %s ORDER BY position",
            (user_id,),
        )
        perm_rows = await cur.fetchall()
        return OverrideRecord(
            user_id=r[0],
            chat=ChatData(prefix=r[1], suffix=r[2], color=r[3]),
            permissions=PermissionSet(Permission(name=p[0], negated=p[1]) for p in perm_rows),
        )

    async def create(self, record: OverrideRecord) -> OverrideRecord:
        """Insert chat row and permission rows."""
        await self._conn.execute(
            "INSERT INTO chat_override (user_id, prefix, suffix, color) VALUES (%s, %s, %s, %s)",
            (record.user_id, record.chat.prefix, record.chat.suffix, record.chat.color),
        )
        await self._insert_permissions(record)
        return record

    async def update(self, record: OverrideRecord) -> None:
        """Update chat row and replace permission rows."""
        await self._conn.execute(
            "UPDATE chat_override SET prefix=%s, suffix=%s, color=%s WHERE user_id=%s",
            (record.chat.prefix, record.chat.suffix, record.chat.color, record.user_id),
        )
        await self._conn.execute(
            "DELETE FROM permission_override WHERE user_id = %s",
            (record.user_id,),
        )
        await self._insert_permissions(record)

    async def delete(self, user_id: int) -> None:
        """Delete record; permission rows cascade."""
        await self._conn.execute(
            "DELETE FROM chat_override WHERE user_id = %s",
            (user_id,),
        )

    async def _insert_permissions(self, record: OverrideRecord) -> None:
        params = _permission_rows(record)
        if not params:
            return
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO permission_override (user_id, name, negated, position) "
                "VALUES (%s, %s, %s, %s)",
                params,
            )


def _permission_rows(record: OverrideRecord) -> list[tuple[int, str, bool, int]]:
    """permission_override rows for a record, positioned in set order."""
    return [
        (record.user_id, p.name, p.negated, position)
        for position, p in enumerate(record.permissions)
    ]
