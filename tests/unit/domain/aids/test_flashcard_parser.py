"""Tests for FlashcardParser domain service."""

from mindweave.domain.aids.services.flashcard_parser import FlashcardPair, FlashcardParser


class TestFlashcardParser:
    def test_parses_question_answer_lines(self) -> None:
        content = (
            "Q: What is ATP?\nA: The cell's energy currency.\n"
            "Q: Where is it made?\nA: Mitochondria."
        )
        assert FlashcardParser.parse(content) == [
            FlashcardPair(question="What is ATP?", answer="The cell's energy currency."),
            FlashcardPair(question="Where is it made?", answer="Mitochondria."),
        ]

    def test_accepts_long_labels_and_bold_markers(self) -> None:
        content = "**Question:** What is DNA?\n**Answer:** Genetic material."
        assert FlashcardParser.parse(content) == [
            FlashcardPair(question="What is DNA?", answer="Genetic material.")
        ]

    def test_skips_noise_and_unpaired_lines(self) -> None:
        content = "\n".join(
            [
                "Here are your flashcards:",
                "A: An answer with no question",
                "Q: First?",
                "",
                "A: One.",
                "Q: Never answered?",
            ]
        )
        assert FlashcardParser.parse(content) == [FlashcardPair(question="First?", answer="One.")]

    def test_later_question_replaces_pending_one(self) -> None:
        content = "Q: Dropped?\nQ: Kept?\nA: Yes."
        assert FlashcardParser.parse(content) == [FlashcardPair(question="Kept?", answer="Yes.")]

    def test_empty_content(self) -> None:
        assert FlashcardParser.parse("") == []
