"""Study aid domain exceptions."""

from mindweave.domain.common.exceptions import DomainError


class AidAlreadyExistsError(DomainError):
    """Raised when an aid of the same kind is already stored for the node."""

    def __init__(self, kind: str, node_id: int) -> None:
        super().__init__(f"A {kind} aid already exists for node {node_id}", {"node_id": node_id})
        self.kind = kind
        self.node_id = node_id
