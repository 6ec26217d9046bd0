"""Repository for Source domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from mindweave.domain.common.value_objects.ids import SourceId, UserId
from mindweave.domain.sources.entities.source import Source
from mindweave.exceptions import SourceNotFoundError
from mindweave.infrastructure.sources.mappers.source_mapper import SourceMapper
from mindweave.models import Source as SourceORM


class SourceRepository:
    """Repository for Source domain entities. Writes are flushed, never committed."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SourceMapper()

    def find_by_id(self, source_id: SourceId) -> Source | None:
        orm_model = self.db.get(SourceORM, source_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all_by_owner(self, owner_id: UserId) -> list[Source]:
        """
        Get all sources owned by a user.

        Returns:
            List of source entities, newest first
        """
        stmt = (
            select(SourceORM)
            .where(SourceORM.owner_id == owner_id.value)
            .order_by(SourceORM.created_at.desc(), SourceORM.id.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_ids_by_owner(self, owner_id: UserId) -> list[SourceId]:
        stmt = (
            select(SourceORM.id).where(SourceORM.owner_id == owner_id.value).order_by(SourceORM.id)
        )
        return [SourceId(source_id) for source_id in self.db.execute(stmt).scalars().all()]

    def add(self, source: Source) -> Source:
        orm_model = self.mapper.to_orm(source)
        self.db.add(orm_model)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def update(self, source: Source) -> Source:
        orm_model = self.db.get(SourceORM, source.id.value)
        if not orm_model:
            raise SourceNotFoundError(source.id.value)
        self.mapper.to_orm(source, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)
