from typing import Protocol

from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.progress.entities.progress_entry import ProgressEntry


class ProgressRepositoryProtocol(Protocol):
    def add(self, entry: ProgressEntry) -> ProgressEntry: ...

    def find_timeline(self, user_id: UserId) -> list[ProgressEntry]:
        """The user's entries, newest first, ties broken by insertion order."""
        ...
