"""Use case for accepting new sources and handing them to the weaver."""

import structlog

from mindweave.application.common.unit_of_work import UnitOfWork
from mindweave.application.sources.protocols.job_queue import JobQueueProtocol, MindmapJob
from mindweave.application.sources.protocols.source_repository import SourceRepositoryProtocol
from mindweave.application.sources.protocols.text_extraction_service import (
    TextExtractionServiceProtocol,
)
from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.sources.entities.source import Source, SourceType
from mindweave.exceptions import (
    InvalidArgumentError,
    NotImplementedFeatureError,
    ServiceUnavailableError,
)

logger = structlog.get_logger(__name__)

QUEUE_UNAVAILABLE_MESSAGE = "The processing queue is currently unavailable."


class IngestSourceUseCase:
    """Extracts text, records the source and enqueues one weaving job."""

    def __init__(
        self,
        source_repository: SourceRepositoryProtocol,
        text_extraction_service: TextExtractionServiceProtocol,
        job_queue: JobQueueProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.source_repository = source_repository
        self.text_extraction = text_extraction_service
        self.job_queue = job_queue
        self.uow = uow

    async def process_new_url(self, url: str, user_id: UserId) -> Source:
        """
        Ingest a URL.

        Video-hosting URLs are transcribed, anything else is scraped.

        Raises:
            InvalidArgumentError: If the URL is blank or no text could be extracted
            ExtractionError: If the extractor failed
        """
        url = url.strip()
        if not url:
            raise InvalidArgumentError("URL is required.")

        source_type = SourceType.for_url(url)
        if source_type == SourceType.YOUTUBE:
            text = await self.text_extraction.fetch_transcript(url)
        else:
            text = await self.text_extraction.scrape_text(url)

        if not text or not text.strip():
            logger.warning("source_text_empty", url=url, source_type=source_type.value)
            raise InvalidArgumentError("Could not extract any text from the provided source.")

        with self.uow:
            source = self.source_repository.add(
                Source.create(owner_id=user_id, type=source_type, origin=url)
            )
            self.uow.commit()

        try:
            await self.job_queue.enqueue(
                MindmapJob(source_id=source.id.value, extracted_text=text)
            )
        except Exception as e:
            logger.error(
                "source_enqueue_failed", source_id=source.id.value, error=str(e), exc_info=True
            )
            self._record_enqueue_failure(source)
            raise ServiceUnavailableError(QUEUE_UNAVAILABLE_MESSAGE) from e

        logger.info(
            "source_queued",
            source_id=source.id.value,
            user_id=user_id.value,
            source_type=source_type.value,
            text_length=len(text),
        )
        return source

    async def process_new_file(self, filename: str, user_id: UserId) -> Source:
        logger.info("file_source_rejected", filename=filename, user_id=user_id.value)
        raise NotImplementedFeatureError("File processing is not yet implemented.")

    def _record_enqueue_failure(self, source: Source) -> None:
        """Best effort. Leaves no source ``queued`` without a job behind it."""
        try:
            source.fail(QUEUE_UNAVAILABLE_MESSAGE)
            with self.uow:
                self.source_repository.update(source)
                self.uow.commit()
        except Exception:
            logger.critical(
                "source_failure_annotation_failed", source_id=source.id.value, exc_info=True
            )
