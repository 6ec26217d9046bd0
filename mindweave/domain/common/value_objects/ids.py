from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserId must be non-negative")


@dataclass(frozen=True)
class SourceId(EntityId):
    """Strongly-typed source identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("SourceId must be non-negative")


@dataclass(frozen=True)
class NodeId(EntityId):
    """Strongly-typed mind-map node identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("NodeId must be non-negative")


@dataclass(frozen=True)
class EdgeId(EntityId):
    """Strongly-typed mind-map edge identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("EdgeId must be non-negative")


@dataclass(frozen=True)
class AidId(EntityId):
    """Strongly-typed study aid identifier. Unique per aid kind only."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("AidId must be non-negative")


@dataclass(frozen=True)
class ProgressEntryId(EntityId):
    """Strongly-typed progress entry identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("ProgressEntryId must be non-negative")
