from mindweave.application.ownership.ownership_verifier import OwnershipVerifier
from mindweave.application.sources.protocols.source_repository import SourceRepositoryProtocol
from mindweave.domain.common.value_objects.ids import SourceId, UserId
from mindweave.domain.sources.entities.source import Source


class GetSourcesUseCase:
    """Read-only access to a user's sources."""

    def __init__(
        self,
        source_repository: SourceRepositoryProtocol,
        ownership_verifier: OwnershipVerifier,
    ) -> None:
        self.source_repository = source_repository
        self.ownership_verifier = ownership_verifier

    def list_sources(self, user_id: UserId) -> list[Source]:
        return self.source_repository.find_all_by_owner(user_id)

    def get_source(self, source_id: SourceId, user_id: UserId) -> Source:
        return self.ownership_verifier.verify_source_ownership(source_id, user_id)
