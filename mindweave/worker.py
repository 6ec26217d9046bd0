"""
Knowledge weaver worker process.

Run with ``python -m mindweave.worker`` (or the ``mindweave-worker`` script).
"""

import asyncio

import structlog

from mindweave.application.sources.protocols.job_queue import MindmapJob
from mindweave.config import configure_logging, get_settings
from mindweave.core import container
from mindweave.database import (
    dispose_engine,
    get_session_factory,
    initialize_database,
    session_scope,
)
from mindweave.domain.common.value_objects.ids import SourceId
from mindweave.infrastructure.common.di import build_with_session
from mindweave.infrastructure.queue.worker import KnowledgeWeaverWorker

logger = structlog.get_logger(__name__)


async def weave_job(job: MindmapJob) -> None:
    """Run one weaving job in its own database session."""
    session_factory = get_session_factory(get_settings())
    with session_scope(session_factory) as session:
        use_case = build_with_session(container.weave_mindmap_use_case, session)
        await use_case.weave(SourceId(job.source_id), job.extracted_text)


async def run_worker() -> None:
    settings = get_settings()
    queue = container.job_queue()
    await queue.ping()

    worker = KnowledgeWeaverWorker(
        queue=queue,
        handler=weave_job,
        concurrency=settings.WORKER_CONCURRENCY,
        poll_timeout_seconds=settings.WORKER_POLL_TIMEOUT_SECONDS,
    )
    worker.install_signal_handlers()
    try:
        await worker.run()
    finally:
        await queue.close()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    initialize_database(settings)
    logger.info("worker_booting", queue=settings.MINDMAP_QUEUE_NAME)
    try:
        asyncio.run(run_worker())
    finally:
        dispose_engine()


if __name__ == "__main__":
    main()
