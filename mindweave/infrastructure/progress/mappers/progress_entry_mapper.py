"""Mapper for ProgressEntry ORM ↔ Domain conversion."""

from mindweave.domain.common.value_objects.ids import NodeId, ProgressEntryId, UserId
from mindweave.domain.progress.entities.progress_entry import ProgressEntry, ProgressStatus
from mindweave.models import ProgressEntry as ProgressEntryORM


class ProgressEntryMapper:
    def to_domain(self, orm_model: ProgressEntryORM) -> ProgressEntry:
        return ProgressEntry.create_with_id(
            id=ProgressEntryId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            node_id=NodeId(orm_model.node_id),
            time_spent_minutes=orm_model.time_spent_minutes,
            status=ProgressStatus(orm_model.status),
            logged_at=orm_model.logged_at,
        )

    def to_orm(self, domain_entity: ProgressEntry) -> ProgressEntryORM:
        """Entries are append-only, so there is no update path."""
        return ProgressEntryORM(
            user_id=domain_entity.user_id.value,
            node_id=domain_entity.node_id.value,
            time_spent_minutes=domain_entity.time_spent_minutes,
            status=domain_entity.status.value,
            logged_at=domain_entity.logged_at,
        )
