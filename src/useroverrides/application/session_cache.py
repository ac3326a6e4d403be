"""Session cache - per-connection copies of override records."""

from dataclasses import dataclass

from useroverrides.application.override_store import OverrideStore
from useroverrides.domain.entities import OverrideRecord


@dataclass
class _Session:
    user_id: int
    record: OverrideRecord | None


class SessionCache:
    """Read-through cache keyed by session id.

    Registers itself with the store so that every committed change to a
    tracked user replaces the session copies before the store lock is released.
    """

    def __init__(self, store: OverrideStore) -> None:
        self._store = store
        self._sessions: dict[str, _Session] = {}
        store.add_listener(self._on_record_changed)

    async def attach(self, session_id: str, user_id: int) -> OverrideRecord | None:
        """Bind a session to a user and prime it from the store."""
        record = await self._store.get(user_id)
        self._sessions[session_id] = _Session(user_id=user_id, record=record)
        return record

    def detach(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def get(self, session_id: str) -> OverrideRecord | None:
        session = self._sessions.get(session_id)
        if session is None or session.record is None:
            return None
        return session.record.copy()

    def user_id_for(self, session_id: str) -> int | None:
        session = self._sessions.get(session_id)
        return session.user_id if session else None

    def is_online(self, user_id: int) -> bool:
        return any(s.user_id == user_id for s in self._sessions.values())

    async def _on_record_changed(self, user_id: int, record: OverrideRecord | None) -> None:
        for session in self._sessions.values():
            if session.user_id == user_id:
                session.record = record.copy() if record else None
