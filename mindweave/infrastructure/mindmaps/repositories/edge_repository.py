"""Repository for mind-map edges."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from mindweave.domain.common.value_objects.ids import NodeId, SourceId
from mindweave.domain.mindmaps.entities.edge import Edge
from mindweave.infrastructure.mindmaps.mappers.node_mapper import EdgeMapper
from mindweave.models import Edge as EdgeORM


class EdgeRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = EdgeMapper()

    def find_by_source(self, source_id: SourceId) -> list[Edge]:
        stmt = select(EdgeORM).where(EdgeORM.source_id == source_id.value).order_by(EdgeORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def add_all(self, source_id: SourceId, pairs: list[tuple[NodeId, NodeId]]) -> list[Edge]:
        orm_models = [
            self.mapper.to_orm(Edge.create(source_id, source_node_id, target_node_id))
            for source_node_id, target_node_id in pairs
        ]
        self.db.add_all(orm_models)
        self.db.flush()
        return [self.mapper.to_domain(orm) for orm in orm_models]
