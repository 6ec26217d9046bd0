"""Use case for serving cached study aids and generating missing ones."""

from dataclasses import dataclass

import structlog

from mindweave.application.aids.protocols.aid_generation_service import (
    AidGenerationServiceProtocol,
)
from mindweave.application.aids.protocols.aid_repository import AidRepositoryProtocol
from mindweave.application.common.unit_of_work import UnitOfWork
from mindweave.application.ownership.ownership_verifier import OwnershipVerifier
from mindweave.domain.aids.entities.aid import Aid
from mindweave.domain.aids.entities.aid_kind import AidKind, aid_kind_policy
from mindweave.domain.aids.exceptions import AidAlreadyExistsError
from mindweave.domain.aids.services.flashcard_parser import FlashcardPair, FlashcardParser
from mindweave.domain.common.value_objects.ids import NodeId, UserId
from mindweave.exceptions import ServiceUnavailableError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AidResult:
    aid: Aid
    was_created: bool

    @property
    def cards(self) -> list[FlashcardPair]:
        """Parsed question/answer pairs. Empty for kinds other than flashcards."""
        if self.aid.kind != AidKind.FLASHCARDS:
            return []
        return FlashcardParser.parse(self.aid.content)


class FetchOrCreateAidUseCase:
    """Cache gateway in front of the generation service."""

    def __init__(
        self,
        aid_repository: AidRepositoryProtocol,
        ownership_verifier: OwnershipVerifier,
        generation_service: AidGenerationServiceProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.aid_repository = aid_repository
        self.ownership_verifier = ownership_verifier
        self.generation_service = generation_service
        self.uow = uow

    async def fetch_or_create(
        self,
        node_id: NodeId,
        kind: AidKind | str,
        user_id: UserId,
        force_regenerate: bool = False,
    ) -> AidResult:
        """
        Return the node's aid of ``kind``, generating it on a cache miss.

        ``force_regenerate`` only applies to regenerable kinds (modules): the
        existing aid keeps its id and gets fresh content. It is ignored for
        every other kind.

        Raises:
            ValidationError: If ``kind`` is not a known aid kind
            NodeNotFoundError / ForbiddenError: From the ownership check
            ServiceUnavailableError: If generation failed or returned nothing
            GenerationTimeoutError: If generation timed out
        """
        if not isinstance(kind, AidKind):
            kind = AidKind.parse(kind)

        node = self.ownership_verifier.verify_node_ownership(node_id, user_id)
        policy = aid_kind_policy(kind)

        existing = self.aid_repository.find_by_node(kind, node.id)
        if existing is not None:
            if force_regenerate and policy.regenerable:
                regenerated = await self._regenerate(existing, node.source_text())
                return AidResult(aid=regenerated, was_created=False)
            logger.info(
                "aid_cache_hit", kind=kind.value, node_id=node.id.value, aid_id=existing.id.value
            )
            return AidResult(aid=existing, was_created=False)

        logger.info("aid_cache_miss", kind=kind.value, node_id=node.id.value)
        content = await self._generate(kind, node.source_text())
        aid = Aid.create(kind=kind, node_id=node.id, user_id=user_id, content=content)

        with self.uow:
            try:
                saved = self.aid_repository.add(aid)
                self.uow.commit()
            except AidAlreadyExistsError:
                # A concurrent request stored this aid between our read and write
                self.uow.rollback()
                winner = self.aid_repository.find_by_node(kind, node.id)
                if winner is None:
                    raise
                logger.info("aid_insert_lost_race", kind=kind.value, node_id=node.id.value)
                return AidResult(aid=winner, was_created=False)

        logger.info("aid_created", kind=kind.value, node_id=node.id.value, aid_id=saved.id.value)
        return AidResult(aid=saved, was_created=True)

    async def _generate(self, kind: AidKind, source_text: str) -> str:
        # Release the read transaction so no connection is held during the model call
        self.uow.rollback()
        content = await self.generation_service.generate(kind, source_text)
        if not content or not content.strip():
            logger.error("aid_generation_empty", kind=kind.value)
            raise ServiceUnavailableError
        return content

    async def _regenerate(self, aid: Aid, source_text: str) -> Aid:
        content = await self._generate(aid.kind, source_text)
        aid.regenerate(content)
        with self.uow:
            updated = self.aid_repository.update(aid)
            self.uow.commit()
        logger.info(
            "aid_regenerated", kind=aid.kind.value, node_id=aid.node_id.value, aid_id=aid.id.value
        )
        return updated
