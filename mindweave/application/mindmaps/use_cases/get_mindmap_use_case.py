from dataclasses import dataclass

from mindweave.application.mindmaps.protocols.edge_repository import EdgeRepositoryProtocol
from mindweave.application.mindmaps.protocols.node_repository import NodeRepositoryProtocol
from mindweave.application.ownership.ownership_verifier import OwnershipVerifier
from mindweave.domain.common.value_objects.ids import SourceId, UserId
from mindweave.domain.mindmaps.entities.edge import Edge
from mindweave.domain.mindmaps.entities.node import Node


@dataclass(frozen=True)
class Mindmap:
    nodes: list[Node]
    edges: list[Edge]


class GetMindmapUseCase:
    def __init__(
        self,
        node_repository: NodeRepositoryProtocol,
        edge_repository: EdgeRepositoryProtocol,
        ownership_verifier: OwnershipVerifier,
    ) -> None:
        self.node_repository = node_repository
        self.edge_repository = edge_repository
        self.ownership_verifier = ownership_verifier

    def get_mindmap(self, source_id: SourceId, user_id: UserId) -> Mindmap:
        """Nodes and edges of an owned source. Empty until weaving completes."""
        self.ownership_verifier.verify_source_ownership(source_id, user_id)
        return Mindmap(
            nodes=self.node_repository.find_by_source(source_id),
            edges=self.edge_repository.find_by_source(source_id),
        )
