"""Repository for the append-only progress log."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.progress.entities.progress_entry import ProgressEntry
from mindweave.infrastructure.progress.mappers.progress_entry_mapper import ProgressEntryMapper
from mindweave.models import ProgressEntry as ProgressEntryORM


class ProgressRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ProgressEntryMapper()

    def add(self, entry: ProgressEntry) -> ProgressEntry:
        orm_model = self.mapper.to_orm(entry)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def find_timeline(self, user_id: UserId) -> list[ProgressEntry]:
        """
        Get a user's progress log.

        Returns:
            Entries ordered by logged_at DESC; entries logged at the same
            instant are ordered by insertion, newest first
        """
        stmt = (
            select(ProgressEntryORM)
            .where(ProgressEntryORM.user_id == user_id.value)
            .order_by(ProgressEntryORM.logged_at.desc(), ProgressEntryORM.id.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]
