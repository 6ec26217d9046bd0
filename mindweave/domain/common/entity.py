"""
Base class for Entities.

Entities keep their identity while their state changes. Two entities are
equal when their ids are equal, whatever their other attributes hold.

Example:
    @dataclass
    class Node(Entity[NodeId]):
        id: NodeId
        title: str

        def rename(self, title: str) -> None:
            self.title = title
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Ids wrap the integer primary key assigned by the database, so a
    ``SourceId(3)`` can never be passed where a ``NodeId`` is expected.
    """

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. The database assigns the real one."""
        return cls(0)

    def is_persisted(self) -> bool:
        return self.value > 0

    def to_primitive(self) -> int:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
