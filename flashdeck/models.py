"""Database models."""

import uuid
from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from flashdeck.database import Base


class FlashcardSet(Base):
    """
    A flashcard set document.

    The set row and its card rows are always written together. `version`
    is bumped by SQLAlchemy on every UPDATE and checked in its WHERE clause.
    """

    __tablename__ = "flashcard_sets"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    category: Mapped[str] = mapped_column(String(50), nullable=False, default="General")
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    average_score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    cards: Mapped[list["FlashcardSetCard"]] = relationship(
        back_populates="flashcard_set",
        cascade="all, delete-orphan",
        order_by="FlashcardSetCard.position",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_flashcard_sets_owner_updated", "owner_id", "updated_at"),
        Index("ix_flashcard_sets_public_created", "is_public", "created_at"),
    )
    __mapper_args__ = {"version_id_col": version}  # noqa: RUF012

    def __repr__(self) -> str:
        """String representation of FlashcardSet."""
        return f"<FlashcardSet(id={self.id}, title='{self.title}', cards={len(self.cards)})>"


class FlashcardSetCard(Base):
    """A card stored as part of its set; position keeps the set's order."""

    __tablename__ = "flashcard_set_cards"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    set_id: Mapped[int] = mapped_column(
        ForeignKey("flashcard_sets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    question: Mapped[str] = mapped_column(String(1000), nullable=False)
    answer: Mapped[str] = mapped_column(String(2000), nullable=False)
    # NULL = not attempted, True = correct, False = incorrect
    is_correct: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    last_reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    flashcard_set: Mapped[FlashcardSet] = relationship(back_populates="cards")

    def __repr__(self) -> str:
        """String representation of FlashcardSetCard."""
        return f"<FlashcardSetCard(id={self.id}, question='{self.question[:50]}')>"
