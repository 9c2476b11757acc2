"""Create flashcard_sets and flashcard_set_cards tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create flashcard set tables."""
    op.create_table(
        "flashcard_sets",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False, server_default=""),
        sa.Column("category", sa.String(50), nullable=False, server_default="General"),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("total_reviews", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("average_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcard_sets_id"), "flashcard_sets", ["id"], unique=False)
    op.create_index(
        op.f("ix_flashcard_sets_owner_id"), "flashcard_sets", ["owner_id"], unique=False
    )
    op.create_index(
        "ix_flashcard_sets_owner_updated", "flashcard_sets", ["owner_id", "updated_at"]
    )
    op.create_index(
        "ix_flashcard_sets_public_created", "flashcard_sets", ["is_public", "created_at"]
    )

    op.create_table(
        "flashcard_set_cards",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("set_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("question", sa.String(1000), nullable=False),
        sa.Column("answer", sa.String(2000), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=True),
        sa.Column("last_reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("review_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["set_id"], ["flashcard_sets.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_flashcard_set_cards_set_id"), "flashcard_set_cards", ["set_id"], unique=False
    )


def downgrade() -> None:
    """Drop flashcard set tables."""
    op.drop_index(op.f("ix_flashcard_set_cards_set_id"), table_name="flashcard_set_cards")
    op.drop_table("flashcard_set_cards")
    op.drop_index("ix_flashcard_sets_public_created", table_name="flashcard_sets")
    op.drop_index("ix_flashcard_sets_owner_updated", table_name="flashcard_sets")
    op.drop_index(op.f("ix_flashcard_sets_owner_id"), table_name="flashcard_sets")
    op.drop_index(op.f("ix_flashcard_sets_id"), table_name="flashcard_sets")
    op.drop_table("flashcard_sets")
