"""
FlashcardSet aggregate root.

A set owns an ordered list of cards and the statistics derived from their
review states. Cards are only reachable through their set.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from flashdeck.domain.common.aggregate_root import AggregateRoot
from flashdeck.domain.common.exceptions import InvariantViolationError, ValidationError
from flashdeck.domain.common.value_objects import CardId, FlashcardSetId, UserId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.domain.learning.events import (
    CardAdded,
    CardRemoved,
    CardReviewed,
    CardUpdated,
    FlashcardSetCreated,
    FlashcardSetUpdated,
)
from flashdeck.domain.learning.exceptions import CardNotFoundError
from flashdeck.domain.learning.services.score_calculator import (
    calculate_average_score,
    count_outcomes,
)
from flashdeck.domain.learning.value_objects.review_receipt import ReviewReceipt

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_CATEGORY_LENGTH = 50
MAX_TAG_LENGTH = 20
DEFAULT_CATEGORY = "General"


def _clean_title(title: str | None) -> str:
    text = (title or "").strip()
    if not text:
        raise ValidationError("Set title cannot be empty", field="title")
    if len(text) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
        )
    return text


def _clean_optional(value: str | None, field: str, max_length: int, default: str) -> str:
    text = (value or "").strip() or default
    if len(text) > max_length:
        raise ValidationError(
            f"{field.capitalize()} cannot exceed {max_length} characters", field=field
        )
    return text


def normalize_tags(tags: Iterable[str] | None) -> list[str]:
    """
    Strip tags, drop blanks and duplicates, keep first-seen order.

    Raises:
        ValidationError: If a tag is longer than MAX_TAG_LENGTH
    """
    result: list[str] = []
    seen: set[str] = set()
    for raw in tags or ():
        tag = raw.strip()
        if not tag or tag in seen:
            continue
        if len(tag) > MAX_TAG_LENGTH:
            raise ValidationError(
                f"Each tag cannot exceed {MAX_TAG_LENGTH} characters", field="tags", value=tag
            )
        seen.add(tag)
        result.append(tag)
    return result


@dataclass(eq=False)
class FlashcardSet(AggregateRoot[FlashcardSetId]):
    """
    Flashcard set aggregate root.

    Business Rules:
    - Title 1-100 chars, description <= 500, category <= 50 (default "General")
    - Tags are unique, <= 20 chars each, kept in insertion order
    - Card order is insertion order and survives updates and removals
    - total_reviews grows by one per review and never shrinks
    - average_score is derived from card states on every review; removing
      a card leaves it as it was until the next review
    - owner_id and id never change after creation
    """

    id: FlashcardSetId
    owner_id: UserId
    title: str
    created_at: datetime
    updated_at: datetime
    description: str = ""
    category: str = DEFAULT_CATEGORY
    tags: list[str] = field(default_factory=list)
    is_public: bool = False
    cards: list[Card] = field(default_factory=list)
    total_reviews: int = 0
    # Version of the stored document this instance was loaded from; 0 until first save
    version: int = 0
    _average_score: int = field(default=0, init=False, repr=False)
    _card_index: dict[CardId, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.title = _clean_title(self.title)
        self.description = _clean_optional(
            self.description, "description", MAX_DESCRIPTION_LENGTH, ""
        )
        self.category = _clean_optional(
            self.category, "category", MAX_CATEGORY_LENGTH, DEFAULT_CATEGORY
        )
        self.tags = normalize_tags(self.tags)

        if self.total_reviews < 0:
            raise InvariantViolationError("FlashcardSet", "total_reviews cannot be negative")
        if self.total_reviews < sum(card.review_count for card in self.cards):
            raise InvariantViolationError(
                "FlashcardSet", "total_reviews cannot be lower than the reviews of its cards"
            )

        self._reindex()
        if len(self._card_index) != len(self.cards):
            raise InvariantViolationError("FlashcardSet", "card ids must be unique")

    # Query methods
    @property
    def average_score(self) -> int:
        return self._average_score

    @property
    def card_count(self) -> int:
        return len(self.cards)

    @property
    def reviewed_count(self) -> int:
        """Cards whose latest outcome is correct or incorrect."""
        return count_outcomes(self.cards)[0]

    @property
    def correct_count(self) -> int:
        """Cards whose latest outcome is correct."""
        return count_outcomes(self.cards)[1]

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def has_card(self, card_id: CardId) -> bool:
        return card_id in self._card_index

    def get_card(self, card_id: CardId) -> Card:
        """
        Look up a card inside this set.

        Raises:
            CardNotFoundError: If the card does not belong to this set
        """
        return self.cards[self._index_of(card_id)]

    # Command methods
    def add_card(self, question: str, answer: str) -> Card:
        """
        Append a new unattempted card to the end of the set.

        Raises:
            ValidationError: If question or answer is empty or too long
        """
        now = datetime.now(UTC)
        card = Card.create(question, answer, at=now)
        self._append(card)
        self._touch(now)
        self._record_event(CardAdded(set_id=self.id, card_id=card.id))
        return card

    def update_card(self, card_id: CardId, question: str, answer: str) -> Card:
        """
        Replace a card's question and answer in place.

        Review state (correctness, last review, review count) is untouched.

        Raises:
            CardNotFoundError: If the card does not belong to this set
            ValidationError: If question or answer is empty or too long
        """
        card = self.get_card(card_id)
        now = datetime.now(UTC)
        card.update_content(question, answer, at=now)
        self._touch(now)
        self._record_event(CardUpdated(set_id=self.id, card_id=card.id))
        return card

    def remove_card(self, card_id: CardId) -> None:
        """
        Remove a card, keeping the relative order of the others.

        Statistics are not recomputed here.

        Raises:
            CardNotFoundError: If the card does not belong to this set
        """
        index = self._index_of(card_id)
        del self.cards[index]
        self._reindex()
        self._touch(datetime.now(UTC))
        self._record_event(CardRemoved(set_id=self.id, card_id=card_id))

    def record_review(self, card_id: CardId, is_correct: bool) -> ReviewReceipt:
        """
        Record a review of one card and refresh the set statistics.

        Raises:
            CardNotFoundError: If the card does not belong to this set
        """
        card = self.get_card(card_id)
        now = datetime.now(UTC)
        card.mark_reviewed(is_correct, at=now)
        self.total_reviews += 1
        self._average_score = calculate_average_score(self.cards)
        self._touch(now)
        self._record_event(
            CardReviewed(
                set_id=self.id,
                card_id=card.id,
                is_correct=is_correct,
                total_reviews=self.total_reviews,
                average_score=self._average_score,
            )
        )
        return ReviewReceipt(
            card_id=card.id,
            is_correct=is_correct,
            reviewed_at=now,
            review_count=card.review_count,
            total_reviews=self.total_reviews,
            average_score=self._average_score,
        )

    def update_details(
        self,
        title: str | None = None,
        description: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        is_public: bool | None = None,
    ) -> list[str]:
        """
        Change the descriptive fields that were supplied.

        Returns:
            Names of the fields that were given

        Raises:
            ValidationError: If a field is out of bounds
        """
        changed: list[str] = []
        # Validate everything before assigning anything
        new_title = _clean_title(title) if title is not None else None
        new_description = (
            _clean_optional(description, "description", MAX_DESCRIPTION_LENGTH, "")
            if description is not None
            else None
        )
        new_category = (
            _clean_optional(category, "category", MAX_CATEGORY_LENGTH, DEFAULT_CATEGORY)
            if category is not None
            else None
        )
        new_tags = normalize_tags(tags) if tags is not None else None

        if new_title is not None:
            self.title = new_title
            changed.append("title")
        if new_description is not None:
            self.description = new_description
            changed.append("description")
        if new_category is not None:
            self.category = new_category
            changed.append("category")
        if new_tags is not None:
            self.tags = new_tags
            changed.append("tags")
        if is_public is not None:
            self.is_public = is_public
            changed.append("is_public")

        if changed:
            self._touch(datetime.now(UTC))
            self._record_event(FlashcardSetUpdated(set_id=self.id, changed_fields=tuple(changed)))
        return changed

    # Internals
    def _index_of(self, card_id: CardId) -> int:
        index = self._card_index.get(card_id)
        if index is None:
            raise CardNotFoundError(card_id, self.id)
        return index

    def _append(self, card: Card) -> None:
        self._card_index[card.id] = len(self.cards)
        self.cards.append(card)

    def _reindex(self) -> None:
        self._card_index = {card.id: index for index, card in enumerate(self.cards)}

    def _touch(self, at: datetime) -> None:
        self.updated_at = at

    # Factory methods
    @classmethod
    def create(
        cls,
        owner_id: UserId,
        title: str,
        description: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        is_public: bool = False,
        cards: Iterable[tuple[str, str]] | None = None,
    ) -> "FlashcardSet":
        """Factory for a new set; initial cards are (question, answer) pairs."""
        now = datetime.now(UTC)
        flashcard_set = cls(
            id=FlashcardSetId.generate(),
            owner_id=owner_id,
            title=title,
            description=description or "",
            category=category or DEFAULT_CATEGORY,
            tags=list(tags or []),
            is_public=is_public,
            created_at=now,
            updated_at=now,
        )
        for question, answer in cards or ():
            flashcard_set._append(Card.create(question, answer, at=now))
        flashcard_set._record_event(
            FlashcardSetCreated(
                owner_id=owner_id,
                title=flashcard_set.title,
                card_count=flashcard_set.card_count,
            )
        )
        return flashcard_set

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardSetId,
        owner_id: UserId,
        title: str,
        created_at: datetime,
        updated_at: datetime,
        version: int,
        description: str = "",
        category: str = DEFAULT_CATEGORY,
        tags: list[str] | None = None,
        is_public: bool = False,
        cards: list[Card] | None = None,
        total_reviews: int = 0,
        average_score: int = 0,
    ) -> "FlashcardSet":
        """Factory for reconstituting a set from persistence."""
        if not 0 <= average_score <= 100:  # noqa: PLR2004
            raise InvariantViolationError("FlashcardSet", "average_score must be within 0-100")
        flashcard_set = cls(
            id=id,
            owner_id=owner_id,
            title=title,
            description=description,
            category=category,
            tags=list(tags or []),
            is_public=is_public,
            cards=list(cards or []),
            total_reviews=total_reviews,
            version=version,
            created_at=created_at,
            updated_at=updated_at,
        )
        flashcard_set._average_score = average_score
        return flashcard_set
