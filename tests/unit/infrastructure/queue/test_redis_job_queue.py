"""Tests for RedisJobQueue against a mocked redis client."""

import json
from unittest.mock import AsyncMock

import pytest

from mindweave.application.sources.protocols.job_queue import MindmapJob
from mindweave.infrastructure.queue.redis_job_queue import RedisJobQueue


@pytest.fixture
def redis_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def queue(redis_client: AsyncMock) -> RedisJobQueue:
    job_queue = RedisJobQueue("redis://localhost:6379/0", "mindmap-generation")
    job_queue._client = redis_client
    return job_queue


class TestRedisJobQueue:
    def test_key(self, queue: RedisJobQueue) -> None:
        assert queue.key == "queue:mindmap-generation"

    async def test_enqueue_pushes_camel_case_json(
        self, queue: RedisJobQueue, redis_client: AsyncMock
    ) -> None:
        await queue.enqueue(MindmapJob(source_id=7, extracted_text="Some text"))

        redis_client.rpush.assert_awaited_once()
        key, raw = redis_client.rpush.await_args.args
        assert key == "queue:mindmap-generation"
        assert json.loads(raw) == {"sourceId": 7, "extractedText": "Some text"}

    async def test_dequeue_returns_job(self, queue: RedisJobQueue, redis_client: AsyncMock) -> None:
        redis_client.blpop.return_value = (
            "queue:mindmap-generation",
            '{"sourceId": 3, "extractedText": "Body"}',
        )

        job = await queue.dequeue(timeout_seconds=2)

        assert job == MindmapJob(source_id=3, extracted_text="Body")
        redis_client.blpop.assert_awaited_once_with(["queue:mindmap-generation"], timeout=2)

    async def test_dequeue_timeout(self, queue: RedisJobQueue, redis_client: AsyncMock) -> None:
        redis_client.blpop.return_value = None
        assert await queue.dequeue(timeout_seconds=1) is None

    @pytest.mark.parametrize(
        "raw", ["not json", '{"sourceId": 0, "extractedText": "x"}', '{"sourceId": 1}']
    )
    async def test_dequeue_discards_malformed_payload(
        self, queue: RedisJobQueue, redis_client: AsyncMock, raw: str
    ) -> None:
        redis_client.blpop.return_value = ("queue:mindmap-generation", raw)
        assert await queue.dequeue(timeout_seconds=1) is None

    async def test_close(self, queue: RedisJobQueue, redis_client: AsyncMock) -> None:
        await queue.close()
        redis_client.aclose.assert_awaited_once()
        assert queue._client is None
