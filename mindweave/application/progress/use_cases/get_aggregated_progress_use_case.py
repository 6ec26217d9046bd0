"""Use case for the progress dashboard."""

import structlog

from mindweave.application.mindmaps.protocols.node_repository import NodeRepositoryProtocol
from mindweave.application.progress.protocols.progress_repository import (
    ProgressRepositoryProtocol,
)
from mindweave.application.sources.protocols.source_repository import SourceRepositoryProtocol
from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.progress.services.progress_aggregation_service import (
    AggregatedProgress,
    ProgressAggregationService,
)

logger = structlog.get_logger(__name__)


class GetAggregatedProgressUseCase:
    def __init__(
        self,
        source_repository: SourceRepositoryProtocol,
        node_repository: NodeRepositoryProtocol,
        progress_repository: ProgressRepositoryProtocol,
        source_query_limit: int = 30,
    ) -> None:
        self.source_repository = source_repository
        self.node_repository = node_repository
        self.progress_repository = progress_repository
        self.source_query_limit = source_query_limit

    def get_aggregated_progress(self, user_id: UserId) -> AggregatedProgress:
        """
        Chart counts, time totals and the raw timeline for a user.

        Only nodes of the first ``source_query_limit`` owned sources are
        counted (0 means no limit). Time totals cover the whole timeline.
        """
        source_ids = self.source_repository.find_ids_by_owner(user_id)

        if self.source_query_limit and len(source_ids) > self.source_query_limit:
            logger.warning(
                "progress_sources_truncated",
                user_id=user_id.value,
                owned_sources=len(source_ids),
                limit=self.source_query_limit,
            )
            source_ids = source_ids[: self.source_query_limit]

        nodes = self.node_repository.find_by_sources(source_ids) if source_ids else []
        timeline = self.progress_repository.find_timeline(user_id)

        return ProgressAggregationService.aggregate(nodes, timeline)
