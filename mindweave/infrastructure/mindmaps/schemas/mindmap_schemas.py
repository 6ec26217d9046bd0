from pydantic import Field

from mindweave.application.mindmaps.use_cases.get_mindmap_use_case import Mindmap
from mindweave.domain.mindmaps.entities.edge import Edge
from mindweave.domain.mindmaps.entities.node import Node
from mindweave.infrastructure.common.schemas import CamelModel


class NodeResponse(CamelModel):
    id: int
    source_id: int
    title: str
    summary: str
    status_badge: str | None = Field(None, description="Status of the latest progress entry")

    @classmethod
    def from_domain(cls, node: Node) -> "NodeResponse":
        return cls(
            id=node.id.value,
            source_id=node.source_id.value,
            title=node.title,
            summary=node.summary,
            status_badge=node.status_badge.value if node.status_badge else None,
        )


class EdgeResponse(CamelModel):
    id: int
    source_id: int
    source: int = Field(..., description="Node id the edge starts at")
    target: int = Field(..., description="Node id the edge points to")

    @classmethod
    def from_domain(cls, edge: Edge) -> "EdgeResponse":
        return cls(
            id=edge.id.value,
            source_id=edge.source_id.value,
            source=edge.source_node_id.value,
            target=edge.target_node_id.value,
        )


class MindmapResponse(CamelModel):
    nodes: list[NodeResponse]
    edges: list[EdgeResponse]

    @classmethod
    def from_domain(cls, mindmap: Mindmap) -> "MindmapResponse":
        return cls(
            nodes=[NodeResponse.from_domain(node) for node in mindmap.nodes],
            edges=[EdgeResponse.from_domain(edge) for edge in mindmap.edges],
        )
