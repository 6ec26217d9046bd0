"""Progress entry entity. Entries are append-only."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

from mindweave.domain.common.entity import Entity
from mindweave.domain.common.exceptions import ValidationError
from mindweave.domain.common.value_objects.ids import NodeId, ProgressEntryId, UserId


class ProgressStatus(StrEnum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: str) -> "ProgressStatus":
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Invalid status. Must be one of: {allowed}", field="status", value=value
            ) from None


@dataclass
class ProgressEntry(Entity[ProgressEntryId]):
    """
    One logged study session on a node.

    Business Rules:
    - Time spent is a non-negative number of whole minutes
    - Status is in_progress or completed
    """

    id: ProgressEntryId
    user_id: UserId
    node_id: NodeId
    time_spent_minutes: int
    status: ProgressStatus
    logged_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if isinstance(self.time_spent_minutes, bool) or not isinstance(
            self.time_spent_minutes, int
        ):
            raise ValidationError(
                "Time spent must be a whole number of minutes",
                field="time_spent_minutes",
                value=self.time_spent_minutes,
            )
        if self.time_spent_minutes < 0:
            raise ValidationError(
                "Time spent cannot be negative",
                field="time_spent_minutes",
                value=self.time_spent_minutes,
            )

    @classmethod
    def create(
        cls,
        user_id: UserId,
        node_id: NodeId,
        time_spent_minutes: int,
        status: ProgressStatus,
    ) -> "ProgressEntry":
        """Create a new entry stamped with the current time."""
        return cls(
            id=ProgressEntryId.generate(),
            user_id=user_id,
            node_id=node_id,
            time_spent_minutes=time_spent_minutes,
            status=status,
            logged_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: ProgressEntryId,
        user_id: UserId,
        node_id: NodeId,
        time_spent_minutes: int,
        status: ProgressStatus,
        logged_at: datetime,
    ) -> "ProgressEntry":
        """Reconstitute an entry from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            node_id=node_id,
            time_spent_minutes=time_spent_minutes,
            status=status,
            logged_at=logged_at,
        )
