"""Ownership checks shared by every node and source operation."""

import structlog

from mindweave.application.mindmaps.protocols.node_repository import NodeRepositoryProtocol
from mindweave.application.sources.protocols.source_repository import SourceRepositoryProtocol
from mindweave.domain.common.value_objects.ids import NodeId, SourceId, UserId
from mindweave.domain.mindmaps.entities.node import Node
from mindweave.domain.sources.entities.source import Source
from mindweave.exceptions import ForbiddenError, NodeNotFoundError, SourceNotFoundError

logger = structlog.get_logger(__name__)


class OwnershipVerifier:
    """Resolves a node or source only if the requester owns it."""

    def __init__(
        self,
        node_repository: NodeRepositoryProtocol,
        source_repository: SourceRepositoryProtocol,
    ) -> None:
        self.node_repository = node_repository
        self.source_repository = source_repository

    def verify_node_ownership(self, node_id: NodeId, user_id: UserId) -> Node:
        """
        Load a node owned by ``user_id``.

        Raises:
            NodeNotFoundError: If the node does not exist
            ForbiddenError: If its source is missing or owned by someone else
        """
        node = self.node_repository.find_by_id(node_id)
        if node is None:
            raise NodeNotFoundError(node_id.value)

        source = self.source_repository.find_by_id(node.source_id)
        if source is None or not source.is_owned_by(user_id):
            logger.warning(
                "node_access_denied",
                node_id=node_id.value,
                user_id=user_id.value,
                source_missing=source is None,
            )
            raise ForbiddenError("Forbidden: You do not own this resource.")

        return node

    def verify_source_ownership(self, source_id: SourceId, user_id: UserId) -> Source:
        """
        Load a source owned by ``user_id``.

        Raises:
            SourceNotFoundError: If the source does not exist
            ForbiddenError: If it is owned by someone else
        """
        source = self.source_repository.find_by_id(source_id)
        if source is None:
            raise SourceNotFoundError(source_id.value)
        if not source.is_owned_by(user_id):
            logger.warning(
                "source_access_denied", source_id=source_id.value, user_id=user_id.value
            )
            raise ForbiddenError("Forbidden: You do not own this resource.")
        return source
