"""Use case for weaving extracted source text into a mind map."""

import structlog

from mindweave.application.common.unit_of_work import UnitOfWork
from mindweave.application.mindmaps.protocols.edge_repository import EdgeRepositoryProtocol
from mindweave.application.mindmaps.protocols.knowledge_weaver_service import (
    KnowledgeWeaverServiceProtocol,
)
from mindweave.application.mindmaps.protocols.node_repository import NodeRepositoryProtocol
from mindweave.application.sources.protocols.source_repository import SourceRepositoryProtocol
from mindweave.domain.common.value_objects.ids import SourceId
from mindweave.domain.mindmaps.services.mindmap_draft_resolver import MindmapDraftResolver
from mindweave.exceptions import MindweaveError, SourceNotFoundError

logger = structlog.get_logger(__name__)


def _failure_message(exc: BaseException) -> str:
    message = exc.message if isinstance(exc, MindweaveError) else str(exc)
    return message.strip() or type(exc).__name__


class WeaveMindmapUseCase:
    """
    Runs one weaving job.

    The source moves queued -> weaving_mindmap (committed on its own), then
    the graph and the completed status are committed together. Any failure
    rolls back and leaves the source failed with the error message.
    """

    def __init__(
        self,
        source_repository: SourceRepositoryProtocol,
        node_repository: NodeRepositoryProtocol,
        edge_repository: EdgeRepositoryProtocol,
        knowledge_weaver: KnowledgeWeaverServiceProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.source_repository = source_repository
        self.node_repository = node_repository
        self.edge_repository = edge_repository
        self.knowledge_weaver = knowledge_weaver
        self.uow = uow

    async def weave(self, source_id: SourceId, raw_text: str) -> None:
        """
        Build and store the mind map for a source.

        Raises:
            SourceNotFoundError: If the source row does not exist
            Exception: Whatever made weaving fail, after the source was
                marked failed
        """
        log = logger.bind(source_id=source_id.value)

        source = self.source_repository.find_by_id(source_id)
        if source is None:
            log.error("weaving_source_missing")
            raise SourceNotFoundError(source_id.value)
        if source.status.is_terminal:
            log.warning("weaving_skipped_terminal_source", status=source.status.value)
            return

        try:
            with self.uow:
                source.start_weaving()
                self.source_repository.update(source)
                self.uow.commit()
            log.info("weaving_started", text_length=len(raw_text))

            draft = await self.knowledge_weaver.weave(raw_text)

            with self.uow:
                node_ids = self.node_repository.add_drafts(source.id, draft.nodes)
                resolved = MindmapDraftResolver.resolve(draft.connections, node_ids)
                if resolved.dropped:
                    log.warning(
                        "mindmap_connections_dropped",
                        dropped=[f"{c.source_key}->{c.target_key}" for c in resolved.dropped],
                    )
                self.edge_repository.add_all(source.id, resolved.pairs)
                source.complete()
                self.source_repository.update(source)
                self.uow.commit()
        except Exception as exc:
            log.error("weaving_job_failed", error=str(exc), exc_info=True)
            self._record_failure(source_id, _failure_message(exc))
            raise

        log.info("weaving_completed", nodes=len(node_ids), edges=len(resolved.pairs))

    def _record_failure(self, source_id: SourceId, message: str) -> None:
        """Best effort. A failure here is logged and never propagated."""
        try:
            self.uow.rollback()
            source = self.source_repository.find_by_id(source_id)
            if source is None:
                raise SourceNotFoundError(source_id.value)
            source.fail(message)
            with self.uow:
                self.source_repository.update(source)
                self.uow.commit()
            logger.info("source_marked_failed", source_id=source_id.value, error=message)
        except Exception:
            logger.critical(
                "source_failure_annotation_failed",
                source_id=source_id.value,
                original_error=message,
                exc_info=True,
            )
