"""
Card entity: one question/answer pair with its own review state.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import InvariantViolationError, ValidationError
from flashdeck.domain.common.value_objects import CardId

MAX_QUESTION_LENGTH = 1000
MAX_ANSWER_LENGTH = 2000


class Correctness(Enum):
    """Outcome of the latest review of a card."""

    UNATTEMPTED = "unattempted"
    CORRECT = "correct"
    INCORRECT = "incorrect"

    @classmethod
    def from_flag(cls, is_correct: bool | None) -> "Correctness":
        """Map the nullable isCorrect flag used on the wire and in storage."""
        if is_correct is None:
            return cls.UNATTEMPTED
        return cls.CORRECT if is_correct else cls.INCORRECT

    def as_flag(self) -> bool | None:
        if self is Correctness.UNATTEMPTED:
            return None
        return self is Correctness.CORRECT


def clean_card_text(value: str | None, field: str, max_length: int) -> str:
    """
    Strip a question or answer and check its bounds.

    Raises:
        ValidationError: If the text is empty after stripping or too long
    """
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field.capitalize()} cannot be empty", field=field)
    if len(text) > max_length:
        raise ValidationError(
            f"{field.capitalize()} cannot exceed {max_length} characters", field=field
        )
    return text


@dataclass(eq=False)
class Card(Entity[CardId]):
    """
    A study card owned by exactly one FlashcardSet.

    Business Rules:
    - Question (max 1000 chars) and answer (max 2000 chars) cannot be empty
    - review_count never decreases
    - review_count > 0, a non-UNATTEMPTED correctness and a last_reviewed_at
      timestamp always go together
    """

    id: CardId
    question: str
    answer: str
    created_at: datetime
    updated_at: datetime
    correctness: Correctness = Correctness.UNATTEMPTED
    last_reviewed_at: datetime | None = None
    review_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.question = clean_card_text(self.question, "question", MAX_QUESTION_LENGTH)
        self.answer = clean_card_text(self.answer, "answer", MAX_ANSWER_LENGTH)

        if self.review_count < 0:
            raise InvariantViolationError("Card", "review_count cannot be negative")

        reviewed = self.review_count > 0
        if reviewed != (self.correctness is not Correctness.UNATTEMPTED) or reviewed != (
            self.last_reviewed_at is not None
        ):
            raise InvariantViolationError(
                "Card",
                "review_count, correctness and last_reviewed_at must agree on whether "
                "the card has been reviewed",
            )

    @property
    def is_reviewed(self) -> bool:
        return self.correctness is not Correctness.UNATTEMPTED

    def update_content(self, question: str, answer: str, at: datetime | None = None) -> None:
        """
        Replace question and answer, leaving the review state untouched.

        Raises:
            ValidationError: If question or answer is empty or too long
        """
        question = clean_card_text(question, "question", MAX_QUESTION_LENGTH)
        answer = clean_card_text(answer, "answer", MAX_ANSWER_LENGTH)
        self.question = question
        self.answer = answer
        self.updated_at = at or datetime.now(UTC)

    def mark_reviewed(self, is_correct: bool, at: datetime | None = None) -> None:
        """
        Record one review outcome.

        A repeated review overwrites the outcome; the counter always grows.
        """
        if not isinstance(is_correct, bool):
            raise ValidationError(
                "Review outcome must be true or false", field="is_correct", value=is_correct
            )
        now = at or datetime.now(UTC)
        self.correctness = Correctness.from_flag(is_correct)
        self.last_reviewed_at = now
        self.review_count += 1
        self.updated_at = now

    @classmethod
    def create(cls, question: str, answer: str, at: datetime | None = None) -> "Card":
        """Create a new, unattempted card with a fresh id."""
        now = at or datetime.now(UTC)
        return cls(
            id=CardId.generate(),
            question=question,
            answer=answer,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CardId,
        question: str,
        answer: str,
        created_at: datetime,
        updated_at: datetime,
        correctness: Correctness = Correctness.UNATTEMPTED,
        last_reviewed_at: datetime | None = None,
        review_count: int = 0,
    ) -> "Card":
        """Reconstitute a card from persistence."""
        return cls(
            id=id,
            question=question,
            answer=answer,
            created_at=created_at,
            updated_at=updated_at,
            correctness=correctness,
            last_reviewed_at=last_reviewed_at,
            review_count=review_count,
        )
