"""Tests for AidKind parsing and per-kind policy."""

from datetime import UTC, datetime

import pytest

from mindweave.domain.aids.entities.aid import Aid
from mindweave.domain.aids.entities.aid_kind import AidKind, aid_kind_policy
from mindweave.domain.common.exceptions import DomainError, InvariantViolationError, ValidationError
from mindweave.domain.common.value_objects import AidId, NodeId, UserId


class TestAidKind:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("summary", AidKind.SUMMARY),
            ("module", AidKind.MODULE),
            ("flashcards", AidKind.FLASHCARDS),
            ("study_plan", AidKind.STUDY_PLAN),
        ],
    )
    def test_parse_known_kinds(self, value: str, expected: AidKind) -> None:
        assert AidKind.parse(value) is expected

    def test_parse_unknown_kind(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AidKind.parse("quiz")
        assert exc_info.value.message == (
            "Invalid aid type. Must be one of: summary, module, flashcards, study_plan"
        )
        assert exc_info.value.field == "type"

    def test_only_modules_are_regenerable(self) -> None:
        assert [kind for kind in AidKind if aid_kind_policy(kind).regenerable] == [AidKind.MODULE]

    def test_each_kind_has_its_own_collection(self) -> None:
        collections = {aid_kind_policy(kind).collection for kind in AidKind}
        assert collections == {"summaries", "modules", "flashcards", "study_plans"}


def _make_aid(kind: AidKind, content: str = "Original content") -> Aid:
    return Aid.create_with_id(
        id=AidId(1),
        kind=kind,
        node_id=NodeId(2),
        user_id=UserId(3),
        content=content,
        generated_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


class TestAid:
    def test_rejects_empty_content(self) -> None:
        with pytest.raises(DomainError):
            _make_aid(AidKind.SUMMARY, content="   ")

    def test_regenerate_module_keeps_id(self) -> None:
        aid = _make_aid(AidKind.MODULE)
        aid.regenerate("Fresh content")
        assert aid.id == AidId(1)
        assert aid.content == "Fresh content"
        assert aid.generated_at > datetime(2024, 1, 1, tzinfo=UTC)

    def test_regenerate_summary_is_rejected(self) -> None:
        aid = _make_aid(AidKind.SUMMARY)
        with pytest.raises(InvariantViolationError):
            aid.regenerate("Fresh content")
        assert aid.content == "Original content"
