from datetime import datetime

from pydantic import BaseModel, Field

from mindweave.domain.progress.entities.progress_entry import ProgressEntry
from mindweave.domain.progress.services.progress_aggregation_service import AggregatedProgress
from mindweave.infrastructure.common.schemas import CamelModel


class ProgressLogRequest(CamelModel):
    """Schema for logging study time on a node."""

    node_id: int = Field(..., description="Node that was studied")
    time_spent_minutes: int = Field(..., ge=0, strict=True, description="Whole minutes spent")
    status: str = Field(..., description="in_progress or completed")


class ProgressEntryResponse(CamelModel):
    id: int
    user_id: int
    node_id: int
    time_spent_minutes: int
    status: str
    logged_at: datetime

    @classmethod
    def from_domain(cls, entry: ProgressEntry) -> "ProgressEntryResponse":
        return cls(
            id=entry.id.value,
            user_id=entry.user_id.value,
            node_id=entry.node_id.value,
            time_spent_minutes=entry.time_spent_minutes,
            status=entry.status.value,
            logged_at=entry.logged_at,
        )


class ChartData(BaseModel):
    """Node counts per status. Keys are the status values themselves."""

    completed: int
    in_progress: int
    not_started: int


class ProgressTotalsResponse(CamelModel):
    total_minutes: int
    total_hours: float
    total_nodes: int


class AggregatedProgressResponse(CamelModel):
    chart_data: ChartData
    totals: ProgressTotalsResponse
    timeline: list[ProgressEntryResponse]

    @classmethod
    def from_domain(cls, progress: AggregatedProgress) -> "AggregatedProgressResponse":
        return cls(
            chart_data=ChartData(
                completed=progress.chart.completed,
                in_progress=progress.chart.in_progress,
                not_started=progress.chart.not_started,
            ),
            totals=ProgressTotalsResponse(
                total_minutes=progress.totals.total_minutes,
                total_hours=progress.totals.total_hours,
                total_nodes=progress.totals.total_nodes,
            ),
            timeline=[ProgressEntryResponse.from_domain(entry) for entry in progress.timeline],
        )
