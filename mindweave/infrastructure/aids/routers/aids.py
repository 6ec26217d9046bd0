from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Response, status

from mindweave.application.aids.use_cases.fetch_or_create_aid_use_case import (
    FetchOrCreateAidUseCase,
)
from mindweave.core import container
from mindweave.domain.common.exceptions import DomainError
from mindweave.domain.common.value_objects.ids import NodeId
from mindweave.domain.identity.entities.user import User
from mindweave.exceptions import MindweaveError
from mindweave.infrastructure.aids.schemas import AidRequest, AidResponse
from mindweave.infrastructure.common.di import inject_use_case
from mindweave.infrastructure.common.schemas import ApiResponse, envelope
from mindweave.infrastructure.identity.dependencies import get_current_user

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/aids", tags=["aids"])


@router.post("")
async def get_or_create_aid(
    request: AidRequest,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        FetchOrCreateAidUseCase, Depends(inject_use_case(container.fetch_or_create_aid_use_case))
    ],
) -> ApiResponse[AidResponse]:
    """
    Get a study aid for a node, generating it on a cache miss.

    ``type`` is one of summary, module, flashcards or study_plan. Responds
    201 when the aid was just generated, 200 when it came from the cache.
    """
    try:
        result = await use_case.fetch_or_create(
            NodeId(request.node_id), request.type, current_user.id
        )
    except (MindweaveError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_process_aid",
            node_id=request.node_id,
            aid_type=request.type,
            error=str(e),
            exc_info=True,
        )
        raise MindweaveError("Failed to process aid request.") from e

    if result.was_created:
        response.status_code = status.HTTP_201_CREATED
        return envelope(AidResponse.from_result(result), "Aid generated successfully.")
    return envelope(AidResponse.from_result(result), "Aid retrieved from cache.")
