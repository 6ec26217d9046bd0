"""Use case for logging study progress on a node."""

import structlog

from mindweave.application.common.unit_of_work import UnitOfWork
from mindweave.application.mindmaps.protocols.node_repository import NodeRepositoryProtocol
from mindweave.application.ownership.ownership_verifier import OwnershipVerifier
from mindweave.application.progress.protocols.progress_repository import (
    ProgressRepositoryProtocol,
)
from mindweave.domain.common.value_objects.ids import NodeId, UserId
from mindweave.domain.progress.entities.progress_entry import ProgressEntry, ProgressStatus

logger = structlog.get_logger(__name__)


class LogProgressUseCase:
    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        node_repository: NodeRepositoryProtocol,
        ownership_verifier: OwnershipVerifier,
        uow: UnitOfWork,
    ) -> None:
        self.progress_repository = progress_repository
        self.node_repository = node_repository
        self.ownership_verifier = ownership_verifier
        self.uow = uow

    def log_progress(
        self,
        user_id: UserId,
        node_id: NodeId,
        time_spent_minutes: int,
        status: ProgressStatus | str,
    ) -> ProgressEntry:
        """
        Append a progress entry and update the node's status badge.

        Both writes commit together or not at all.

        Raises:
            ValidationError: If status or time spent is invalid
            NodeNotFoundError / ForbiddenError: From the ownership check
        """
        if not isinstance(status, ProgressStatus):
            status = ProgressStatus.parse(status)

        # Validates time spent before touching the database
        entry = ProgressEntry.create(
            user_id=user_id,
            node_id=node_id,
            time_spent_minutes=time_spent_minutes,
            status=status,
        )

        self.ownership_verifier.verify_node_ownership(node_id, user_id)

        with self.uow:
            saved = self.progress_repository.add(entry)
            self.node_repository.update_status_badge(node_id, status)
            self.uow.commit()

        logger.info(
            "progress_logged",
            user_id=user_id.value,
            node_id=node_id.value,
            status=status.value,
            time_spent_minutes=time_spent_minutes,
        )
        return saved
