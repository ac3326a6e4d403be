"""Read chat data use case."""

from useroverrides.application.override_store import OverrideStore
from useroverrides.application.ports import UnitOfWorkFactory
from useroverrides.application.use_cases.access import find_target
from useroverrides.domain.entities import OverrideRecord, UserAccount
from useroverrides.domain.exceptions import NotFound


class ReadChatDataUseCase:
    """Look up a user's override record by account name."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory, store: OverrideStore) -> None:
        self._uow_factory = unit_of_work_factory
        self._store = store

    async def execute(self, target_name: str) -> tuple[UserAccount, OverrideRecord]:
        target = await find_target(self._uow_factory, target_name)
        record = await self._store.get(target.id)
        if record is None:
            raise NotFound("This user has no player specific information to read.")
        return target, record
