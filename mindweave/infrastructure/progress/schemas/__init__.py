from mindweave.infrastructure.progress.schemas.progress_schemas import (
    AggregatedProgressResponse,
    ChartData,
    ProgressEntryResponse,
    ProgressLogRequest,
    ProgressTotalsResponse,
)

__all__ = [
    "AggregatedProgressResponse",
    "ChartData",
    "ProgressEntryResponse",
    "ProgressLogRequest",
    "ProgressTotalsResponse",
]
