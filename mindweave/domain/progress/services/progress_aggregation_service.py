"""Domain service for the progress dashboard."""

from collections.abc import Sequence
from dataclasses import dataclass

from mindweave.domain.common.value_objects.ids import NodeId
from mindweave.domain.mindmaps.entities.node import Node
from mindweave.domain.progress.entities.progress_entry import ProgressEntry, ProgressStatus


@dataclass(frozen=True)
class StatusChart:
    completed: int
    in_progress: int
    not_started: int


@dataclass(frozen=True)
class ProgressTotals:
    total_minutes: int
    total_hours: float
    total_nodes: int


@dataclass(frozen=True)
class AggregatedProgress:
    chart: StatusChart
    totals: ProgressTotals
    timeline: list[ProgressEntry]


class ProgressAggregationService:
    """Stateless domain service."""

    @staticmethod
    def latest_status_by_node(timeline: Sequence[ProgressEntry]) -> dict[NodeId, ProgressStatus]:
        """First status seen per node. ``timeline`` must be newest first."""
        latest: dict[NodeId, ProgressStatus] = {}
        for entry in timeline:
            latest.setdefault(entry.node_id, entry.status)
        return latest

    @classmethod
    def aggregate(
        cls, nodes: Sequence[Node], timeline: Sequence[ProgressEntry]
    ) -> AggregatedProgress:
        """
        Summarize a user's study progress.

        Args:
            nodes: Nodes belonging to the user's sources
            timeline: The user's progress entries, newest first

        Returns:
            Status counts over ``nodes``, time totals over the whole timeline,
            and the timeline itself.
        """
        latest = cls.latest_status_by_node(timeline)

        completed = in_progress = not_started = 0
        for node in nodes:
            status = latest.get(node.id)
            if status == ProgressStatus.COMPLETED:
                completed += 1
            elif status == ProgressStatus.IN_PROGRESS:
                in_progress += 1
            else:
                not_started += 1

        total_minutes = sum(entry.time_spent_minutes for entry in timeline)

        return AggregatedProgress(
            chart=StatusChart(
                completed=completed, in_progress=in_progress, not_started=not_started
            ),
            totals=ProgressTotals(
                total_minutes=total_minutes,
                total_hours=round(total_minutes / 60, 2),
                total_nodes=len(nodes),
            ),
            timeline=list(timeline),
        )
