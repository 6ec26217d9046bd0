from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from mindweave.application.progress.use_cases.get_aggregated_progress_use_case import (
    GetAggregatedProgressUseCase,
)
from mindweave.application.progress.use_cases.log_progress_use_case import LogProgressUseCase
from mindweave.core import container
from mindweave.domain.common.exceptions import DomainError
from mindweave.domain.common.value_objects.ids import NodeId
from mindweave.domain.identity.entities.user import User
from mindweave.exceptions import MindweaveError
from mindweave.infrastructure.common.di import inject_use_case
from mindweave.infrastructure.common.schemas import ApiResponse, envelope
from mindweave.infrastructure.identity.dependencies import get_current_user
from mindweave.infrastructure.progress.schemas import (
    AggregatedProgressResponse,
    ProgressEntryResponse,
    ProgressLogRequest,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.post("/log", status_code=status.HTTP_201_CREATED)
async def log_progress(
    request: ProgressLogRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        LogProgressUseCase, Depends(inject_use_case(container.log_progress_use_case))
    ],
) -> ApiResponse[ProgressEntryResponse]:
    """Log study time on a node and update the node's status badge."""
    try:
        entry = use_case.log_progress(
            user_id=current_user.id,
            node_id=NodeId(request.node_id),
            time_spent_minutes=request.time_spent_minutes,
            status=request.status,
        )
        return envelope(ProgressEntryResponse.from_domain(entry), "Progress logged successfully.")
    except (MindweaveError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_log_progress", node_id=request.node_id, error=str(e), exc_info=True
        )
        raise MindweaveError("Failed to log progress.") from e


@router.get("")
async def get_progress(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        GetAggregatedProgressUseCase,
        Depends(inject_use_case(container.get_aggregated_progress_use_case)),
    ],
) -> ApiResponse[AggregatedProgressResponse]:
    """Status chart, time totals and the full progress timeline."""
    progress = use_case.get_aggregated_progress(current_user.id)
    return envelope(
        AggregatedProgressResponse.from_domain(progress), "Progress retrieved successfully."
    )
