from typing import Protocol

from mindweave.domain.mindmaps.entities.mindmap_draft import MindmapDraft


class KnowledgeWeaverServiceProtocol(Protocol):
    async def weave(self, raw_text: str) -> MindmapDraft: ...
