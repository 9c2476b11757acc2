"""Build response schemas from learning domain objects."""

from flashdeck.domain.learning.entities.card import Card as CardEntity
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet
from flashdeck.domain.learning.value_objects.review_receipt import (
    ReviewReceipt as ReviewReceiptValue,
)
from flashdeck.infrastructure.learning.schemas import (
    Card,
    FlashcardSetDetail,
    FlashcardSetSummary,
    PublicFlashcardSetSummary,
    ReviewReceipt,
)


def card_to_schema(card: CardEntity) -> Card:
    return Card(
        id=card.id.value,
        question=card.question,
        answer=card.answer,
        is_correct=card.correctness.as_flag(),
        last_reviewed=card.last_reviewed_at,
        review_count=card.review_count,
    )


def _summary_fields(flashcard_set: FlashcardSet) -> dict:
    return {
        "id": flashcard_set.id.value,
        "title": flashcard_set.title,
        "description": flashcard_set.description,
        "card_count": flashcard_set.card_count,
        "category": flashcard_set.category,
        "tags": list(flashcard_set.tags),
        "is_public": flashcard_set.is_public,
        "total_reviews": flashcard_set.total_reviews,
        "average_score": flashcard_set.average_score,
        "created_at": flashcard_set.created_at,
        "updated_at": flashcard_set.updated_at,
    }


def set_to_summary(flashcard_set: FlashcardSet) -> FlashcardSetSummary:
    return FlashcardSetSummary(**_summary_fields(flashcard_set))


def set_to_public_summary(flashcard_set: FlashcardSet) -> PublicFlashcardSetSummary:
    return PublicFlashcardSetSummary(
        **_summary_fields(flashcard_set), owner_id=flashcard_set.owner_id.value
    )


def set_to_detail(flashcard_set: FlashcardSet) -> FlashcardSetDetail:
    return FlashcardSetDetail(
        **_summary_fields(flashcard_set),
        cards=[card_to_schema(card) for card in flashcard_set.cards],
    )


def receipt_to_schema(receipt: ReviewReceiptValue) -> ReviewReceipt:
    return ReviewReceipt(
        card_id=receipt.card_id.value,
        is_correct=receipt.is_correct,
        timestamp=receipt.reviewed_at,
        review_count=receipt.review_count,
        total_reviews=receipt.total_reviews,
        average_score=receipt.average_score,
    )
