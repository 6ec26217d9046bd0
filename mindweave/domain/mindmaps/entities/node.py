from dataclasses import dataclass

from mindweave.domain.common.entity import Entity
from mindweave.domain.common.exceptions import ValidationError
from mindweave.domain.common.value_objects.ids import NodeId, SourceId
from mindweave.domain.progress.entities.progress_entry import ProgressStatus

MAX_TITLE_LENGTH = 500


@dataclass
class Node(Entity[NodeId]):
    """
    A concept in a source's mind map.

    The status badge mirrors the status of the most recent progress entry
    logged against the node, or None when nothing has been logged yet.
    """

    id: NodeId
    source_id: SourceId
    title: str
    summary: str
    status_badge: ProgressStatus | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Node title cannot be empty", field="title")
        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Node title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )

    def source_text(self) -> str:
        """Text the study aids are generated from."""
        return f"Title: {self.title}\nSummary: {self.summary}"

    def mark(self, status: ProgressStatus) -> None:
        self.status_badge = status

    @classmethod
    def create(cls, source_id: SourceId, title: str, summary: str) -> "Node":
        """Create a new node (ID will be 0 until persisted)."""
        return cls(
            id=NodeId.generate(),
            source_id=source_id,
            title=title.strip(),
            summary=summary.strip(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: NodeId,
        source_id: SourceId,
        title: str,
        summary: str,
        status_badge: ProgressStatus | None = None,
    ) -> "Node":
        """Reconstitute a node from persistence."""
        return cls(
            id=id,
            source_id=source_id,
            title=title,
            summary=summary,
            status_badge=status_badge,
        )
