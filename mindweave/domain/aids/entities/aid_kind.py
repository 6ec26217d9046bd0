from dataclasses import dataclass
from enum import StrEnum

from mindweave.domain.common.exceptions import ValidationError


class AidKind(StrEnum):
    SUMMARY = "summary"
    MODULE = "module"
    FLASHCARDS = "flashcards"
    STUDY_PLAN = "study_plan"

    @classmethod
    def parse(cls, value: str) -> "AidKind":
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(k.value for k in cls)
            raise ValidationError(
                f"Invalid aid type. Must be one of: {allowed}", field="type", value=value
            ) from None


@dataclass(frozen=True)
class AidKindPolicy:
    """Where a kind is stored and whether an existing aid may be regenerated."""

    collection: str
    regenerable: bool


def aid_kind_policy(kind: AidKind) -> AidKindPolicy:
    match kind:
        case AidKind.SUMMARY:
            return AidKindPolicy(collection="summaries", regenerable=False)
        case AidKind.MODULE:
            return AidKindPolicy(collection="modules", regenerable=True)
        case AidKind.FLASHCARDS:
            return AidKindPolicy(collection="flashcards", regenerable=False)
        case AidKind.STUDY_PLAN:
            return AidKindPolicy(collection="study_plans", regenerable=False)
