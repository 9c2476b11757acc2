"""Mapper for FlashcardSet ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import CardId, FlashcardSetId, UserId
from flashdeck.domain.learning.entities.card import Card, Correctness
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet
from flashdeck.models import FlashcardSet as FlashcardSetORM
from flashdeck.models import FlashcardSetCard as FlashcardSetCardORM


class FlashcardSetMapper:
    """Maps a whole set document (set row plus ordered card rows)."""

    def to_domain(self, orm_model: FlashcardSetORM) -> FlashcardSet:
        """Convert ORM model to domain aggregate."""
        return FlashcardSet.create_with_id(
            id=FlashcardSetId(orm_model.id),
            owner_id=UserId(orm_model.owner_id),
            title=orm_model.title,
            description=orm_model.description,
            category=orm_model.category,
            tags=list(orm_model.tags or []),
            is_public=orm_model.is_public,
            cards=[self.card_to_domain(card) for card in orm_model.cards],
            total_reviews=orm_model.total_reviews,
            average_score=orm_model.average_score,
            version=orm_model.version,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def card_to_domain(self, orm_card: FlashcardSetCardORM) -> Card:
        return Card.create_with_id(
            id=CardId(orm_card.id),
            question=orm_card.question,
            answer=orm_card.answer,
            correctness=Correctness.from_flag(orm_card.is_correct),
            last_reviewed_at=orm_card.last_reviewed_at,
            review_count=orm_card.review_count,
            created_at=orm_card.created_at,
            updated_at=orm_card.updated_at,
        )

    def to_orm(
        self, domain_entity: FlashcardSet, orm_model: FlashcardSetORM | None = None
    ) -> FlashcardSetORM:
        """
        Convert domain aggregate to ORM model.

        When updating, card rows are matched by id: known rows are updated,
        new cards get new rows and rows missing from the aggregate are
        dropped through the delete-orphan cascade.
        """
        if orm_model is None:
            orm_model = FlashcardSetORM(
                id=domain_entity.id.value if domain_entity.id.is_persisted else None,
                owner_id=domain_entity.owner_id.value,
                created_at=domain_entity.created_at,
            )

        orm_model.title = domain_entity.title
        orm_model.description = domain_entity.description
        orm_model.category = domain_entity.category
        orm_model.tags = list(domain_entity.tags)
        orm_model.is_public = domain_entity.is_public
        orm_model.total_reviews = domain_entity.total_reviews
        orm_model.average_score = domain_entity.average_score
        orm_model.updated_at = domain_entity.updated_at

        existing = {orm_card.id: orm_card for orm_card in orm_model.cards}
        orm_cards: list[FlashcardSetCardORM] = []
        for position, card in enumerate(domain_entity.cards):
            orm_card = existing.get(card.id.value)
            if orm_card is None:
                orm_card = FlashcardSetCardORM(id=card.id.value, created_at=card.created_at)
            self._apply_card(card, orm_card, position)
            orm_cards.append(orm_card)
        orm_model.cards = orm_cards
        return orm_model

    def _apply_card(self, card: Card, orm_card: FlashcardSetCardORM, position: int) -> None:
        orm_card.position = position
        orm_card.question = card.question
        orm_card.answer = card.answer
        orm_card.is_correct = card.correctness.as_flag()
        orm_card.last_reviewed_at = card.last_reviewed_at
        orm_card.review_count = card.review_count
        orm_card.updated_at = card.updated_at
