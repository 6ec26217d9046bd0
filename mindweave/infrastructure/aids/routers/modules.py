from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from mindweave.application.aids.use_cases.fetch_or_create_aid_use_case import (
    FetchOrCreateAidUseCase,
)
from mindweave.core import container
from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.domain.common.exceptions import DomainError
from mindweave.domain.common.value_objects.ids import NodeId
from mindweave.domain.identity.entities.user import User
from mindweave.exceptions import MindweaveError
from mindweave.infrastructure.aids.schemas import AidResponse
from mindweave.infrastructure.common.di import inject_use_case
from mindweave.infrastructure.common.schemas import ApiResponse, envelope
from mindweave.infrastructure.identity.dependencies import get_current_user

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/modules", tags=["modules"])


@router.get("/{node_id}")
async def get_or_create_module(
    node_id: int,
    response: Response,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        FetchOrCreateAidUseCase, Depends(inject_use_case(container.fetch_or_create_aid_use_case))
    ],
    regenerate: Annotated[bool, Query(description="Replace the cached module")] = False,
) -> ApiResponse[AidResponse]:
    """
    Get a node's learning module.

    With ``regenerate=true`` an existing module is generated again and
    overwritten in place.
    """
    try:
        result = await use_case.fetch_or_create(
            NodeId(node_id), AidKind.MODULE, current_user.id, force_regenerate=regenerate
        )
    except (MindweaveError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_process_module", node_id=node_id, error=str(e), exc_info=True)
        raise MindweaveError("Failed to process module request.") from e

    if result.was_created:
        response.status_code = status.HTTP_201_CREATED
        message = "Module created successfully."
    elif regenerate:
        message = "Module regenerated successfully."
    else:
        message = "Module retrieved from cache."
    return envelope(AidResponse.from_result(result), message)
