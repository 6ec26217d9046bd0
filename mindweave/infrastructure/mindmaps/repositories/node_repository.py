"""Repository for mind-map nodes."""

import structlog
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from mindweave.domain.common.value_objects.ids import NodeId, SourceId
from mindweave.domain.mindmaps.entities.mindmap_draft import NodeDraft
from mindweave.domain.mindmaps.entities.node import Node
from mindweave.domain.progress.entities.progress_entry import ProgressStatus
from mindweave.exceptions import NodeNotFoundError
from mindweave.infrastructure.mindmaps.mappers.node_mapper import NodeMapper
from mindweave.models import Node as NodeORM

logger = structlog.get_logger(__name__)


class NodeRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = NodeMapper()

    def find_by_id(self, node_id: NodeId) -> Node | None:
        orm_model = self.db.get(NodeORM, node_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_source(self, source_id: SourceId) -> list[Node]:
        stmt = select(NodeORM).where(NodeORM.source_id == source_id.value).order_by(NodeORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_sources(self, source_ids: list[SourceId]) -> list[Node]:
        if not source_ids:
            return []
        stmt = (
            select(NodeORM)
            .where(NodeORM.source_id.in_([source_id.value for source_id in source_ids]))
            .order_by(NodeORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def add_drafts(self, source_id: SourceId, drafts: tuple[NodeDraft, ...]) -> dict[str, NodeId]:
        """
        Stage one node per draft key. A repeated key keeps its first draft.

        Returns:
            Database id of each node, keyed by its draft key
        """
        orm_by_key: dict[str, NodeORM] = {}
        duplicates: list[str] = []
        for draft in drafts:
            if draft.key in orm_by_key:
                duplicates.append(draft.key)
                continue
            orm_by_key[draft.key] = self.mapper.to_orm(
                Node.create(source_id, draft.title, draft.summary)
            )
        if duplicates:
            logger.warning(
                "mindmap_duplicate_node_keys_dropped", source_id=source_id.value, keys=duplicates
            )

        self.db.add_all(orm_by_key.values())
        self.db.flush()
        return {key: NodeId(orm.id) for key, orm in orm_by_key.items()}

    def update_status_badge(self, node_id: NodeId, status: ProgressStatus) -> None:
        result = self.db.execute(
            update(NodeORM).where(NodeORM.id == node_id.value).values(status_badge=status.value)
        )
        if result.rowcount == 0:
            raise NodeNotFoundError(node_id.value)
