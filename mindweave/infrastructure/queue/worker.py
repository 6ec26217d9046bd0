"""Knowledge weaver worker: consumes weaving jobs with bounded concurrency."""

import asyncio
import signal
from collections.abc import Awaitable, Callable
from typing import Protocol

import structlog

from mindweave.application.sources.protocols.job_queue import MindmapJob

logger = structlog.get_logger(__name__)

JobHandler = Callable[[MindmapJob], Awaitable[None]]


class JobSource(Protocol):
    async def dequeue(self, timeout_seconds: int) -> MindmapJob | None: ...


class KnowledgeWeaverWorker:
    """
    Pulls jobs from a queue and runs up to ``concurrency`` of them at once.

    Lifecycle: ``run()`` consumes until ``stop()`` is called (or SIGINT /
    SIGTERM arrives when signal handlers are installed), then waits for the
    in-flight jobs to finish before returning. A failing job is logged and
    never stops the worker.
    """

    def __init__(
        self,
        queue: JobSource,
        handler: JobHandler,
        concurrency: int = 5,
        poll_timeout_seconds: int = 5,
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self.queue = queue
        self.handler = handler
        self.concurrency = concurrency
        self.poll_timeout_seconds = poll_timeout_seconds
        self._slots = asyncio.Semaphore(concurrency)
        self._stopping = asyncio.Event()
        self._in_flight: set[asyncio.Task[None]] = set()

    @property
    def in_flight(self) -> int:
        return len(self._in_flight)

    def stop(self) -> None:
        if not self._stopping.is_set():
            logger.info("worker_stopping", in_flight=self.in_flight)
        self._stopping.set()

    def install_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, self.stop)

    async def run(self) -> None:
        logger.info("worker_started", concurrency=self.concurrency)
        try:
            while not self._stopping.is_set():
                await self._slots.acquire()
                if self._stopping.is_set():
                    self._slots.release()
                    break
                try:
                    job = await self.queue.dequeue(self.poll_timeout_seconds)
                except Exception:
                    self._slots.release()
                    logger.exception("job_dequeue_failed")
                    await self._pause()
                    continue

                if job is None:
                    self._slots.release()
                    continue

                task = asyncio.create_task(self._process(job), name=f"weave-{job.source_id}")
                self._in_flight.add(task)
                task.add_done_callback(self._in_flight.discard)
        finally:
            await self.drain()
        logger.info("worker_stopped")

    async def drain(self) -> None:
        """Wait for every in-flight job to finish."""
        if self._in_flight:
            logger.info("worker_draining", in_flight=self.in_flight)
            await asyncio.gather(*self._in_flight, return_exceptions=True)

    async def _process(self, job: MindmapJob) -> None:
        log = logger.bind(source_id=job.source_id)
        log.info("job_started")
        try:
            await self.handler(job)
        except Exception as e:
            log.error("job_failed", error=str(e))
        else:
            log.info("job_completed")
        finally:
            self._slots.release()

    async def _pause(self) -> None:
        """Back off after a queue error, waking early on stop."""
        try:
            await asyncio.wait_for(self._stopping.wait(), timeout=self.poll_timeout_seconds)
        except TimeoutError:
            pass
