"""Tests for the Card entity."""

from datetime import UTC, datetime

import pytest

from flashdeck.domain.common.exceptions import InvariantViolationError, ValidationError
from flashdeck.domain.common.value_objects import CardId
from flashdeck.domain.learning.entities.card import Card, Correctness


class TestCardCreation:
    def test_create_strips_and_starts_unattempted(self) -> None:
        card = Card.create("  What is 'hola'?  ", "  Hello ")
        assert card.question == "What is 'hola'?"
        assert card.answer == "Hello"
        assert card.correctness is Correctness.UNATTEMPTED
        assert card.last_reviewed_at is None
        assert card.review_count == 0
        assert card.is_reviewed is False

    def test_create_generates_distinct_ids(self) -> None:
        assert Card.create("Q", "A").id != Card.create("Q", "A").id

    @pytest.mark.parametrize(("question", "answer"), [("", "A"), ("   ", "A"), ("Q", "")])
    def test_empty_text_rejected(self, question: str, answer: str) -> None:
        with pytest.raises(ValidationError):
            Card.create(question, answer)

    def test_length_limits(self) -> None:
        Card.create("q" * 1000, "a" * 2000)
        with pytest.raises(ValidationError):
            Card.create("q" * 1001, "a")
        with pytest.raises(ValidationError):
            Card.create("q", "a" * 2001)

    def test_reconstitution_rejects_inconsistent_review_state(self) -> None:
        now = datetime.now(UTC)
        with pytest.raises(InvariantViolationError):
            Card.create_with_id(
                id=CardId.generate(),
                question="Q",
                answer="A",
                created_at=now,
                updated_at=now,
                correctness=Correctness.CORRECT,
                last_reviewed_at=None,
                review_count=1,
            )


class TestCardReview:
    def test_mark_reviewed(self) -> None:
        card = Card.create("Q", "A")
        at = datetime(2026, 1, 1, tzinfo=UTC)
        card.mark_reviewed(False, at=at)
        assert card.correctness is Correctness.INCORRECT
        assert card.last_reviewed_at == at
        assert card.review_count == 1

    def test_repeated_review_overwrites_outcome(self) -> None:
        card = Card.create("Q", "A")
        card.mark_reviewed(False)
        card.mark_reviewed(True)
        assert card.correctness is Correctness.CORRECT
        assert card.review_count == 2

    @pytest.mark.parametrize("outcome", [None, 1, "true"])
    def test_non_boolean_outcome_rejected(self, outcome: object) -> None:
        card = Card.create("Q", "A")
        with pytest.raises(ValidationError):
            card.mark_reviewed(outcome)  # type: ignore[arg-type]
        assert card.correctness is Correctness.UNATTEMPTED
        assert card.review_count == 0
        assert card.last_reviewed_at is None

    def test_update_content_keeps_review_state(self) -> None:
        card = Card.create("Q", "A")
        card.mark_reviewed(True)
        reviewed_at = card.last_reviewed_at
        card.update_content("New Q", "New A")
        assert card.question == "New Q"
        assert card.correctness is Correctness.CORRECT
        assert card.last_reviewed_at == reviewed_at
        assert card.review_count == 1


class TestCorrectness:
    @pytest.mark.parametrize(
        ("flag", "correctness"),
        [
            (None, Correctness.UNATTEMPTED),
            (True, Correctness.CORRECT),
            (False, Correctness.INCORRECT),
        ],
    )
    def test_flag_mapping(self, flag: bool | None, correctness: Correctness) -> None:
        assert Correctness.from_flag(flag) is correctness
        assert correctness.as_flag() is flag
