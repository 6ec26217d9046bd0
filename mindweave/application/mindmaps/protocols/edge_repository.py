from typing import Protocol

from mindweave.domain.common.value_objects.ids import NodeId, SourceId
from mindweave.domain.mindmaps.entities.edge import Edge


class EdgeRepositoryProtocol(Protocol):
    def find_by_source(self, source_id: SourceId) -> list[Edge]: ...

    def add_all(self, source_id: SourceId, pairs: list[tuple[NodeId, NodeId]]) -> list[Edge]: ...
