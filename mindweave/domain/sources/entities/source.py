"""Source entity: a piece of ingested content and root of a mind map."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from urllib.parse import urlparse

from mindweave.domain.common.entity import Entity
from mindweave.domain.common.exceptions import InvariantViolationError, ValidationError
from mindweave.domain.common.value_objects.ids import SourceId, UserId

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")


class SourceType(StrEnum):
    URL = "url"
    YOUTUBE = "youtube"
    FILE = "file"

    @classmethod
    def for_url(cls, url: str) -> "SourceType":
        """Video-hosting URLs are transcribed, everything else is scraped."""
        host = (urlparse(url).hostname or "").lower()
        if any(host == yt or host.endswith("." + yt) for yt in YOUTUBE_HOSTS):
            return cls.YOUTUBE
        return cls.URL


class SourceStatus(StrEnum):
    QUEUED = "queued"
    WEAVING_MINDMAP = "weaving_mindmap"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (SourceStatus.COMPLETED, SourceStatus.FAILED)


@dataclass
class Source(Entity[SourceId]):
    """
    Ingested content owned by a single user.

    Business Rules:
    - Lifecycle is queued -> weaving_mindmap -> completed | failed
    - Completed and failed are terminal
    - A failed source always carries a non-empty error message
    """

    id: SourceId
    owner_id: UserId
    type: SourceType
    origin: str
    status: SourceStatus = SourceStatus.QUEUED
    created_at: datetime | None = None
    mindmap_woven_at: datetime | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.origin or not self.origin.strip():
            raise ValidationError("Source origin cannot be empty", field="origin")
        if self.status == SourceStatus.FAILED and not self.error:
            raise InvariantViolationError("Source", "failed sources must record an error")

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def start_weaving(self) -> None:
        if self.status != SourceStatus.QUEUED:
            raise InvariantViolationError(
                "Source", f"cannot start weaving from status '{self.status}'"
            )
        self.status = SourceStatus.WEAVING_MINDMAP

    def complete(self, woven_at: datetime | None = None) -> None:
        if self.status != SourceStatus.WEAVING_MINDMAP:
            raise InvariantViolationError("Source", f"cannot complete from status '{self.status}'")
        self.status = SourceStatus.COMPLETED
        self.mindmap_woven_at = woven_at or datetime.now(UTC)

    def fail(self, error: str) -> None:
        """Mark as failed. Any non-terminal status may fail."""
        if self.status.is_terminal:
            raise InvariantViolationError("Source", f"cannot fail from status '{self.status}'")
        self.status = SourceStatus.FAILED
        self.error = error.strip() or "Unknown error"

    @classmethod
    def create(cls, owner_id: UserId, type: SourceType, origin: str) -> "Source":
        """Create a new queued source (ID will be 0 until persisted)."""
        return cls(
            id=SourceId.generate(),
            owner_id=owner_id,
            type=type,
            origin=origin.strip(),
        )

    @classmethod
    def create_with_id(
        cls,
        id: SourceId,
        owner_id: UserId,
        type: SourceType,
        origin: str,
        status: SourceStatus,
        created_at: datetime,
        mindmap_woven_at: datetime | None = None,
        error: str | None = None,
    ) -> "Source":
        """Reconstitute a source from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            type=type,
            origin=origin,
            status=status,
            created_at=created_at,
            mindmap_woven_at=mindmap_woven_at,
            error=error,
        )
