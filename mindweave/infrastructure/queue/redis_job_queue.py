"""List-backed job queue on Redis."""

import redis.asyncio as aioredis
import structlog
from pydantic import Field, ValidationError

from mindweave.application.sources.protocols.job_queue import MindmapJob
from mindweave.infrastructure.common.schemas import CamelModel

logger = structlog.get_logger(__name__)

QUEUE_KEY_PREFIX = "queue"


class MindmapJobPayload(CamelModel):
    """Wire format of a weaving job: ``{"sourceId": ..., "extractedText": ...}``."""

    source_id: int = Field(..., gt=0)
    extracted_text: str = Field(..., min_length=1)


class RedisJobQueue:
    """
    Named FIFO queue: producers RPUSH, consumers BLPOP.

    The connection is opened lazily on first use.
    """

    def __init__(self, redis_url: str, queue_name: str) -> None:
        self.redis_url = redis_url
        self.queue_name = queue_name
        self._client: aioredis.Redis | None = None

    @property
    def key(self) -> str:
        return f"{QUEUE_KEY_PREFIX}:{self.queue_name}"

    def _redis(self) -> aioredis.Redis:
        if self._client is None:
            self._client = aioredis.from_url(self.redis_url, decode_responses=True)
        return self._client

    async def ping(self) -> None:
        await self._redis().ping()

    async def enqueue(self, job: MindmapJob) -> None:
        payload = MindmapJobPayload(source_id=job.source_id, extracted_text=job.extracted_text)
        await self._redis().rpush(self.key, payload.model_dump_json(by_alias=True))
        logger.info("job_enqueued", queue=self.queue_name, source_id=job.source_id)

    async def dequeue(self, timeout_seconds: int) -> MindmapJob | None:
        """
        Wait up to ``timeout_seconds`` for the next job.

        Returns None on timeout. Malformed payloads are logged and discarded.
        """
        item = await self._redis().blpop([self.key], timeout=timeout_seconds)
        if item is None:
            return None
        _, raw = item
        try:
            payload = MindmapJobPayload.model_validate_json(raw)
        except ValidationError as e:
            logger.error("job_payload_invalid", queue=self.queue_name, error=str(e))
            return None
        return MindmapJob(source_id=payload.source_id, extracted_text=payload.extracted_text)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
