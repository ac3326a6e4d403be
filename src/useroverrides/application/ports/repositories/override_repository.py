"""Override repository port."""

from typing import Protocol

from useroverrides.domain.entities import OverrideRecord


class OverrideRepository(Protocol):
    """Port for override record persistence (chat row plus permission rows)."""

    async def list_all(self) -> list[OverrideRecord]: ...

    async def get(self, user_id: int) -> OverrideRecord | None: ...

    async def create(self, record: OverrideRecord) -> OverrideRecord: ...

    async def update(self, record: OverrideRecord) -> None: ...

    async def delete(self, user_id: int) -> None: ...
