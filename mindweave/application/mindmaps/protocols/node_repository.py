from typing import Protocol

from mindweave.domain.common.value_objects.ids import NodeId, SourceId
from mindweave.domain.mindmaps.entities.mindmap_draft import NodeDraft
from mindweave.domain.mindmaps.entities.node import Node
from mindweave.domain.progress.entities.progress_entry import ProgressStatus


class NodeRepositoryProtocol(Protocol):
    def find_by_id(self, node_id: NodeId) -> Node | None: ...

    def find_by_source(self, source_id: SourceId) -> list[Node]: ...

    def find_by_sources(self, source_ids: list[SourceId]) -> list[Node]: ...

    def add_drafts(self, source_id: SourceId, drafts: tuple[NodeDraft, ...]) -> dict[str, NodeId]:
        """Stage nodes and return the assigned id for each draft key."""
        ...

    def update_status_badge(self, node_id: NodeId, status: ProgressStatus) -> None: ...
