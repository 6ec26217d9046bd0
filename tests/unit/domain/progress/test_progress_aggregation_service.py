"""Tests for ProgressAggregationService domain service."""

from datetime import UTC, datetime, timedelta

import pytest

from mindweave.domain.common.exceptions import ValidationError
from mindweave.domain.common.value_objects import NodeId, ProgressEntryId, SourceId, UserId
from mindweave.domain.mindmaps.entities.node import Node
from mindweave.domain.progress.entities.progress_entry import ProgressEntry, ProgressStatus
from mindweave.domain.progress.services.progress_aggregation_service import (
    ProgressAggregationService,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


def _node(id: int) -> Node:
    return Node.create_with_id(
        id=NodeId(id), source_id=SourceId(1), title=f"Node {id}", summary="Summary"
    )


def _entry(id: int, node_id: int, minutes: int, status: ProgressStatus, age: int) -> ProgressEntry:
    return ProgressEntry.create_with_id(
        id=ProgressEntryId(id),
        user_id=UserId(1),
        node_id=NodeId(node_id),
        time_spent_minutes=minutes,
        status=status,
        logged_at=NOW - timedelta(minutes=age),
    )


class TestProgressAggregationService:
    def test_latest_status_wins(self) -> None:
        nodes = [_node(1), _node(2), _node(3)]
        timeline = [
            _entry(3, 1, 30, ProgressStatus.COMPLETED, age=0),
            _entry(2, 2, 20, ProgressStatus.IN_PROGRESS, age=10),
            _entry(1, 1, 40, ProgressStatus.IN_PROGRESS, age=20),
        ]

        result = ProgressAggregationService.aggregate(nodes, timeline)

        assert (result.chart.completed, result.chart.in_progress, result.chart.not_started) == (
            1,
            1,
            1,
        )
        assert result.totals.total_minutes == 90
        assert result.totals.total_hours == 1.5
        assert result.totals.total_nodes == 3
        assert result.timeline == timeline

    def test_entries_for_nodes_outside_the_set_still_count_toward_time(self) -> None:
        timeline = [_entry(1, 99, 45, ProgressStatus.COMPLETED, age=0)]

        result = ProgressAggregationService.aggregate([_node(1)], timeline)

        assert result.chart.not_started == 1
        assert result.chart.completed == 0
        assert result.totals.total_minutes == 45

    def test_hours_are_rounded_to_two_decimals(self) -> None:
        timeline = [_entry(1, 1, 10, ProgressStatus.IN_PROGRESS, age=0)]
        result = ProgressAggregationService.aggregate([_node(1)], timeline)
        assert result.totals.total_hours == 0.17

    def test_empty(self) -> None:
        result = ProgressAggregationService.aggregate([], [])
        assert result.totals.total_minutes == 0
        assert result.totals.total_hours == 0
        assert result.timeline == []


class TestProgressEntry:
    def test_rejects_negative_minutes(self) -> None:
        with pytest.raises(ValidationError):
            ProgressEntry.create(UserId(1), NodeId(1), -5, ProgressStatus.IN_PROGRESS)

    @pytest.mark.parametrize("minutes", [1.5, True])
    def test_rejects_non_integer_minutes(self, minutes: object) -> None:
        with pytest.raises(ValidationError):
            ProgressEntry.create(
                UserId(1), NodeId(1), minutes, ProgressStatus.IN_PROGRESS  # type: ignore[arg-type]
            )

    def test_zero_minutes_allowed(self) -> None:
        entry = ProgressEntry.create(UserId(1), NodeId(1), 0, ProgressStatus.COMPLETED)
        assert entry.time_spent_minutes == 0

    def test_parse_unknown_status(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ProgressStatus.parse("not_started")
        assert exc_info.value.message == "Invalid status. Must be one of: in_progress, completed"
