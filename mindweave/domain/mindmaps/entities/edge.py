from dataclasses import dataclass

from mindweave.domain.common.entity import Entity
from mindweave.domain.common.exceptions import ValidationError
from mindweave.domain.common.value_objects.ids import EdgeId, NodeId, SourceId


@dataclass
class Edge(Entity[EdgeId]):
    """Directed link between two nodes of the same source."""

    id: EdgeId
    source_id: SourceId
    source_node_id: NodeId
    target_node_id: NodeId

    def __post_init__(self) -> None:
        if self.source_node_id == self.target_node_id:
            raise ValidationError("Edge cannot connect a node to itself", field="target")

    @classmethod
    def create(cls, source_id: SourceId, source_node_id: NodeId, target_node_id: NodeId) -> "Edge":
        return cls(
            id=EdgeId.generate(),
            source_id=source_id,
            source_node_id=source_node_id,
            target_node_id=target_node_id,
        )

    @classmethod
    def create_with_id(
        cls, id: EdgeId, source_id: SourceId, source_node_id: NodeId, target_node_id: NodeId
    ) -> "Edge":
        return cls(
            id=id,
            source_id=source_id,
            source_node_id=source_node_id,
            target_node_id=target_node_id,
        )
