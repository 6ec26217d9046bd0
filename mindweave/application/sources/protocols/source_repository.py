from typing import Protocol

from mindweave.domain.common.value_objects.ids import SourceId, UserId
from mindweave.domain.sources.entities.source import Source


class SourceRepositoryProtocol(Protocol):
    def find_by_id(self, source_id: SourceId) -> Source | None: ...

    def find_all_by_owner(self, owner_id: UserId) -> list[Source]:
        """Owned sources, newest first."""
        ...

    def find_ids_by_owner(self, owner_id: UserId) -> list[SourceId]:
        """Owned source ids, oldest first."""
        ...

    def add(self, source: Source) -> Source: ...

    def update(self, source: Source) -> Source: ...
