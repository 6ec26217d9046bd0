from datetime import datetime

from pydantic import Field

from mindweave.domain.sources.entities.source import Source
from mindweave.infrastructure.common.schemas import CamelModel


class SourceCreateRequest(CamelModel):
    """Schema for submitting a source. Exactly one of ``url`` or ``file`` is used."""

    url: str | None = Field(None, description="Web page or video URL")
    file: str | None = Field(None, description="Uploaded file name (not yet supported)")


class SourceResponse(CamelModel):
    id: int
    owner_id: int
    type: str
    origin: str
    status: str
    created_at: datetime | None = None
    mindmap_woven_at: datetime | None = None
    error: str | None = None

    @classmethod
    def from_domain(cls, source: Source) -> "SourceResponse":
        return cls(
            id=source.id.value,
            owner_id=source.owner_id.value,
            type=source.type.value,
            origin=source.origin,
            status=source.status.value,
            created_at=source.created_at,
            mindmap_woven_at=source.mindmap_woven_at,
            error=source.error,
        )
