"""Mapper for Source ORM ↔ Domain conversion."""

from mindweave.domain.common.value_objects.ids import SourceId, UserId
from mindweave.domain.sources.entities.source import Source, SourceStatus, SourceType
from mindweave.models import Source as SourceORM


class SourceMapper:
    def to_domain(self, orm_model: SourceORM) -> Source:
        return Source.create_with_id(
            id=SourceId(orm_model.id),
            owner_id=UserId(orm_model.owner_id),
            type=SourceType(orm_model.type),
            origin=orm_model.origin,
            status=SourceStatus(orm_model.status),
            created_at=orm_model.created_at,
            mindmap_woven_at=orm_model.mindmap_woven_at,
            error=orm_model.error,
        )

    def to_orm(self, domain_entity: Source, orm_model: SourceORM | None = None) -> SourceORM:
        """Convert domain entity to ORM model. Owner, type and origin never change."""
        if orm_model:
            orm_model.status = domain_entity.status.value
            orm_model.mindmap_woven_at = domain_entity.mindmap_woven_at
            orm_model.error = domain_entity.error
            return orm_model

        return SourceORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            owner_id=domain_entity.owner_id.value,
            type=domain_entity.type.value,
            origin=domain_entity.origin,
            status=domain_entity.status.value,
            mindmap_woven_at=domain_entity.mindmap_woven_at,
            error=domain_entity.error,
        )
