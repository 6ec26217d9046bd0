"""Tests for study aid prompt construction."""

import pytest

from mindweave.domain.aids.entities.aid_kind import AidKind
from mindweave.infrastructure.ai.prompts import build_prompt


class TestBuildPrompt:
    @pytest.mark.parametrize("kind", list(AidKind))
    def test_is_deterministic(self, kind: AidKind) -> None:
        text = "Title: Osmosis\nSummary: Water moves across a membrane."
        assert build_prompt(kind, text) == build_prompt(kind, text)

    def test_each_kind_has_distinct_instructions(self) -> None:
        instructions = {build_prompt(kind, "text").instructions for kind in AidKind}
        assert len(instructions) == len(AidKind)

    def test_flashcard_instructions_ask_for_parseable_format(self) -> None:
        instructions = build_prompt(AidKind.FLASHCARDS, "text").instructions
        assert "exactly 3" in instructions
        assert "'Q: [Your Question]'" in instructions
        assert "'A: [Your Answer]'" in instructions

    def test_content_is_the_source_text(self) -> None:
        assert build_prompt(AidKind.SUMMARY, "The source text").content == "The source text"
