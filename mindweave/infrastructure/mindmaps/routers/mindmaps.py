from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from mindweave.application.aids.use_cases.fetch_or_create_aid_use_case import (
    FetchOrCreateAidUseCase,
)
from mindweave.application.mindmaps.use_cases.get_mindmap_use_case import GetMindmapUseCase
from mindweave.core import container
from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.domain.common.exceptions import DomainError
from mindweave.domain.common.value_objects.ids import NodeId, SourceId
from mindweave.domain.identity.entities.user import User
from mindweave.exceptions import InvalidArgumentError, MindweaveError
from mindweave.infrastructure.aids.schemas import AidResponse
from mindweave.infrastructure.common.di import inject_use_case
from mindweave.infrastructure.common.schemas import ApiResponse, envelope
from mindweave.infrastructure.identity.dependencies import get_current_user
from mindweave.infrastructure.mindmaps.schemas import MindmapResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/mindmaps", tags=["mindmaps"])


@router.get("")
async def get_mindmap(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        GetMindmapUseCase, Depends(inject_use_case(container.get_mindmap_use_case))
    ],
    source_id: Annotated[int | None, Query(alias="sourceId")] = None,
) -> ApiResponse[MindmapResponse]:
    """Get the nodes and edges woven from a source."""
    if source_id is None:
        raise InvalidArgumentError("sourceId query parameter is required.")

    mindmap = use_case.get_mindmap(SourceId(source_id), current_user.id)
    return envelope(MindmapResponse.from_domain(mindmap), "Mindmap retrieved successfully.")


@router.get("/nodes/{node_id}/flashcards")
async def get_or_create_node_flashcards(
    node_id: int,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        FetchOrCreateAidUseCase, Depends(inject_use_case(container.fetch_or_create_aid_use_case))
    ],
) -> ApiResponse[AidResponse]:
    """
    Get a node's flashcards, generating them on first request.

    Responds 201 when the flashcards were just generated, 200 when served
    from the cache.
    """
    try:
        result = await use_case.fetch_or_create(
            NodeId(node_id), AidKind.FLASHCARDS, current_user.id
        )
    except (MindweaveError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_process_flashcards", node_id=node_id, error=str(e), exc_info=True)
        raise MindweaveError("Failed to process flashcards.") from e

    if result.was_created:
        response.status_code = status.HTTP_201_CREATED
        message = "Flashcards generated successfully."
    else:
        message = "Flashcards retrieved from cache."
    return envelope(AidResponse.from_result(result), message)
