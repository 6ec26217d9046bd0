from dataclasses import dataclass
from datetime import UTC, datetime

from mindweave.domain.aids.entities.aid_kind import AidKind, aid_kind_policy
from mindweave.domain.common.entity import Entity
from mindweave.domain.common.exceptions import DomainError, InvariantViolationError
from mindweave.domain.common.value_objects.ids import AidId, NodeId, UserId


@dataclass
class Aid(Entity[AidId]):
    """
    AI-generated study aid for one node.

    Business Rules:
    - At most one aid per (node, kind)
    - Content cannot be empty
    - Only regenerable kinds (modules) may have their content replaced
    """

    id: AidId
    kind: AidKind
    node_id: NodeId
    user_id: UserId
    content: str
    generated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.content or not self.content.strip():
            raise DomainError("Aid content cannot be empty")

    def regenerate(self, content: str, generated_at: datetime | None = None) -> None:
        """Replace content in place, keeping the identifier."""
        if not aid_kind_policy(self.kind).regenerable:
            raise InvariantViolationError("Aid", f"{self.kind} aids cannot be regenerated")
        if not content or not content.strip():
            raise DomainError("Aid content cannot be empty")
        self.content = content
        self.generated_at = generated_at or datetime.now(UTC)

    @classmethod
    def create(cls, kind: AidKind, node_id: NodeId, user_id: UserId, content: str) -> "Aid":
        """Create a freshly generated aid (ID will be 0 until persisted)."""
        return cls(
            id=AidId.generate(),
            kind=kind,
            node_id=node_id,
            user_id=user_id,
            content=content,
            generated_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: AidId,
        kind: AidKind,
        node_id: NodeId,
        user_id: UserId,
        content: str,
        generated_at: datetime,
    ) -> "Aid":
        """Reconstitute an aid from persistence."""
        return cls(
            id=id,
            kind=kind,
            node_id=node_id,
            user_id=user_id,
            content=content,
            generated_at=generated_at,
        )
