from mindweave.infrastructure.sources.schemas.source_schemas import (
    SourceCreateRequest,
    SourceResponse,
)

__all__ = ["SourceCreateRequest", "SourceResponse"]
