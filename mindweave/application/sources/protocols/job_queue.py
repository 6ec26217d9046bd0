from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class MindmapJob:
    """Payload handed from ingestion to the knowledge weaver."""

    source_id: int
    extracted_text: str


class JobQueueProtocol(Protocol):
    async def enqueue(self, job: MindmapJob) -> None: ...
