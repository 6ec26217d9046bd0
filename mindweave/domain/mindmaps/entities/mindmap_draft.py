"""Unpersisted mind-map graph as produced by the knowledge weaver."""

from dataclasses import dataclass, field

from mindweave.domain.common.exceptions import ValidationError
from mindweave.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class NodeDraft(ValueObject):
    key: str
    title: str
    summary: str

    def __post_init__(self) -> None:
        if not self.key.strip():
            raise ValidationError("Node key cannot be empty", field="key")
        if not self.title.strip():
            raise ValidationError("Node title cannot be empty", field="title", value=self.key)


@dataclass(frozen=True)
class ConnectionDraft(ValueObject):
    source_key: str
    target_key: str


@dataclass(frozen=True)
class MindmapDraft(ValueObject):
    """
    Nodes keyed by a draft-local key, connections referencing those keys.

    Node keys must be unique within a draft. Connections are not validated
    here: see ``MindmapDraftResolver`` for how dangling ones are handled.
    """

    nodes: tuple[NodeDraft, ...]
    connections: tuple[ConnectionDraft, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.nodes:
            raise ValidationError("Mind map must contain at least one node", field="nodes")
        keys = [node.key for node in self.nodes]
        if len(keys) != len(set(keys)):
            raise ValidationError("Mind map node keys must be unique", field="nodes")
