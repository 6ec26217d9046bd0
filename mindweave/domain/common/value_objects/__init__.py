"""Common value objects shared across all domain modules."""

from .ids import (
    AidId,
    EdgeId,
    NodeId,
    ProgressEntryId,
    SourceId,
    UserId,
)

__all__ = [
    "AidId",
    "EdgeId",
    "NodeId",
    "ProgressEntryId",
    "SourceId",
    "UserId",
]
