from mindweave.infrastructure.aids.schemas.aid_schemas import (
    AidRequest,
    AidResponse,
    FlashcardCard,
)

__all__ = ["AidRequest", "AidResponse", "FlashcardCard"]
