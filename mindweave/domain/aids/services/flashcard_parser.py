"""Parse flashcard aid content into question/answer pairs."""

import re
from dataclasses import dataclass

_QUESTION = re.compile(r"^\s*(?:\*\*)?Q(?:uestion)?\s*[:.]\s*(?:\*\*)?\s*(?P<text>.+?)\s*$", re.I)
_ANSWER = re.compile(r"^\s*(?:\*\*)?A(?:nswer)?\s*[:.]\s*(?:\*\*)?\s*(?P<text>.+?)\s*$", re.I)


@dataclass(frozen=True)
class FlashcardPair:
    question: str
    answer: str


class FlashcardParser:
    """Stateless domain service for the ``Q: ...`` / ``A: ...`` line format."""

    @staticmethod
    def parse(content: str) -> list[FlashcardPair]:
        """
        Pair each question line with the answer line that follows it.

        Lines that are neither, answers with no pending question, and
        questions never answered are skipped.
        """
        pairs: list[FlashcardPair] = []
        pending_question: str | None = None

        for line in content.splitlines():
            if match := _QUESTION.match(line):
                pending_question = match.group("text")
            elif (match := _ANSWER.match(line)) and pending_question is not None:
                pairs.append(FlashcardPair(question=pending_question, answer=match.group("text")))
                pending_question = None

        return pairs
