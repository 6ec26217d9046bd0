from typing import Protocol

from mindweave.domain.aids.entities.aid_kind import AidKind


class AidGenerationServiceProtocol(Protocol):
    async def generate(self, kind: AidKind, source_text: str) -> str:
        """
        Generate aid content.

        Raises ServiceUnavailableError when the model fails or AI is not
        configured, GenerationTimeoutError when it does not answer in time.
        """
        ...
