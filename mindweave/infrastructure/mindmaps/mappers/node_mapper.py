"""Mappers for mind-map ORM ↔ Domain conversion."""

from mindweave.domain.common.value_objects.ids import EdgeId, NodeId, SourceId
from mindweave.domain.mindmaps.entities.edge import Edge
from mindweave.domain.mindmaps.entities.node import Node
from mindweave.domain.progress.entities.progress_entry import ProgressStatus
from mindweave.models import Edge as EdgeORM
from mindweave.models import Node as NodeORM


class NodeMapper:
    def to_domain(self, orm_model: NodeORM) -> Node:
        return Node.create_with_id(
            id=NodeId(orm_model.id),
            source_id=SourceId(orm_model.source_id),
            title=orm_model.title,
            summary=orm_model.summary,
            status_badge=ProgressStatus(orm_model.status_badge) if orm_model.status_badge else None,
        )

    def to_orm(self, domain_entity: Node) -> NodeORM:
        return NodeORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            source_id=domain_entity.source_id.value,
            title=domain_entity.title,
            summary=domain_entity.summary,
            status_badge=domain_entity.status_badge.value if domain_entity.status_badge else None,
        )


class EdgeMapper:
    def to_domain(self, orm_model: EdgeORM) -> Edge:
        return Edge.create_with_id(
            id=EdgeId(orm_model.id),
            source_id=SourceId(orm_model.source_id),
            source_node_id=NodeId(orm_model.source_node_id),
            target_node_id=NodeId(orm_model.target_node_id),
        )

    def to_orm(self, domain_entity: Edge) -> EdgeORM:
        return EdgeORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            source_id=domain_entity.source_id.value,
            source_node_id=domain_entity.source_node_id.value,
            target_node_id=domain_entity.target_node_id.value,
        )
