from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from mindweave.application.sources.use_cases.get_sources_use_case import GetSourcesUseCase
from mindweave.application.sources.use_cases.ingest_source_use_case import IngestSourceUseCase
from mindweave.core import container
from mindweave.domain.common.exceptions import DomainError
from mindweave.domain.common.value_objects.ids import SourceId
from mindweave.domain.identity.entities.user import User
from mindweave.exceptions import InvalidArgumentError, MindweaveError
from mindweave.infrastructure.common.di import inject_use_case
from mindweave.infrastructure.common.schemas import ApiResponse, envelope
from mindweave.infrastructure.identity.dependencies import get_current_user
from mindweave.infrastructure.sources.schemas import SourceCreateRequest, SourceResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/sources", tags=["sources"])


@router.post("", status_code=status.HTTP_202_ACCEPTED)
async def create_source(
    request: SourceCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        IngestSourceUseCase, Depends(inject_use_case(container.ingest_source_use_case))
    ],
) -> ApiResponse[SourceResponse]:
    """
    Submit a URL for processing.

    Text is extracted right away; the mind map is woven in the background.
    Poll ``GET /sources/{source_id}`` for the status.
    """
    if not request.url and not request.file:
        raise InvalidArgumentError("A 'url' or 'file' must be provided.")

    try:
        if request.url:
            source = await use_case.process_new_url(request.url, current_user.id)
        else:
            source = await use_case.process_new_file(request.file or "", current_user.id)
        return envelope(
            SourceResponse.from_domain(source), "Source accepted and queued for processing."
        )
    except (MindweaveError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_process_source", user_id=current_user.id.value, error=str(e), exc_info=True
        )
        raise MindweaveError("Failed to process source.") from e


@router.get("")
async def list_sources(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        GetSourcesUseCase, Depends(inject_use_case(container.get_sources_use_case))
    ],
) -> ApiResponse[list[SourceResponse]]:
    """List the current user's sources, newest first."""
    sources = use_case.list_sources(current_user.id)
    return envelope(
        [SourceResponse.from_domain(source) for source in sources],
        "Sources retrieved successfully.",
    )


@router.get("/{source_id}")
async def get_source(
    source_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        GetSourcesUseCase, Depends(inject_use_case(container.get_sources_use_case))
    ],
) -> ApiResponse[SourceResponse]:
    """Get one source, including its weaving status."""
    source = use_case.get_source(SourceId(source_id), current_user.id)
    return envelope(SourceResponse.from_domain(source), "Source retrieved successfully.")
