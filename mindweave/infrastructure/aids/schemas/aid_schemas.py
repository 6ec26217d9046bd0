from datetime import datetime

from pydantic import Field

from mindweave.application.aids.use_cases.fetch_or_create_aid_use_case import AidResult
from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.infrastructure.common.schemas import CamelModel


class AidRequest(CamelModel):
    """Schema for requesting a study aid."""

    node_id: int = Field(..., description="Node the aid is generated for")
    type: str = Field(..., description="One of summary, module, flashcards, study_plan")


class FlashcardCard(CamelModel):
    question: str
    answer: str


class AidResponse(CamelModel):
    """
    A stored study aid.

    ``content`` is the generated text as-is. For flashcards, ``cards`` holds
    the question/answer pairs parsed from it.
    """

    id: int
    node_id: int
    user_id: int
    type: str
    content: str
    generated_at: datetime
    cards: list[FlashcardCard] | None = None

    @classmethod
    def from_result(cls, result: AidResult) -> "AidResponse":
        aid = result.aid
        cards = None
        if aid.kind == AidKind.FLASHCARDS:
            cards = [FlashcardCard(question=c.question, answer=c.answer) for c in result.cards]
        return cls(
            id=aid.id.value,
            node_id=aid.node_id.value,
            user_id=aid.user_id.value,
            type=aid.kind.value,
            content=aid.content,
            generated_at=aid.generated_at,
            cards=cards,
        )
