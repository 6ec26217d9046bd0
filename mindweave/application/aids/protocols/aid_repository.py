from typing import Protocol

from mindweave.domain.aids.entities.aid import Aid
from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.domain.common.value_objects.ids import NodeId


class AidRepositoryProtocol(Protocol):
    def find_by_node(self, kind: AidKind, node_id: NodeId) -> Aid | None:
        """Lowest-id aid of ``kind`` for the node."""
        ...

    def add(self, aid: Aid) -> Aid:
        """Stage a new aid. Raises AidAlreadyExistsError when one is already stored."""
        ...

    def update(self, aid: Aid) -> Aid: ...
