"""Initial schema: users, vocab items, mastery records and word-books.

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


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)

    example_columns = []
    for slot in (1, 2, 3):
        example_columns += [
            sa.Column(f"example_sentence_{slot}", sa.Text(), nullable=True),
            sa.Column(f"example_translation_{slot}", sa.Text(), nullable=True),
            sa.Column(f"example_source_{slot}", sa.String(500), nullable=True),
        ]

    op.create_table(
        "vocab_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("front", sa.String(255), nullable=False),
        sa.Column("back", sa.Text(), nullable=False),
        sa.Column("phonetic", sa.String(255), nullable=True),
        sa.Column("chinese_definition", sa.Text(), nullable=True),
        sa.Column("english_definition", sa.Text(), nullable=True),
        sa.Column("synonyms", sa.JSON(), nullable=False),
        sa.Column("antonyms", sa.JSON(), nullable=False),
        sa.Column("related_words", sa.JSON(), nullable=False),
        sa.Column("image_url", sa.String(1024), nullable=True),
        *example_columns,
        sa.Column("is_favorite", sa.Boolean(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("difficulty_level", sa.String(20), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "front", name="uq_vocab_items_user_front"),
    )
    op.create_index(op.f("ix_vocab_items_id"), "vocab_items", ["id"], unique=False)
    op.create_index(op.f("ix_vocab_items_user_id"), "vocab_items", ["user_id"], unique=False)

    op.create_table(
        "mastery_records",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("vocab_item_id", sa.Integer(), nullable=False),
        sa.Column("correct_streak", sa.Integer(), nullable=False),
        sa.Column("is_learned", sa.Boolean(), nullable=False),
        sa.Column("review_count", sa.Integer(), nullable=False),
        sa.Column("last_reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["vocab_item_id"], ["vocab_items.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "vocab_item_id"),
    )
    op.create_index(
        op.f("ix_mastery_records_is_learned"), "mastery_records", ["is_learned"], unique=False
    )

    op.create_table(
        "word_books",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("cover_image_url", sa.String(1024), nullable=True),
        sa.Column("tag", sa.String(100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_word_books_id"), "word_books", ["id"], unique=False)
    op.create_index(op.f("ix_word_books_user_id"), "word_books", ["user_id"], unique=False)

    op.create_table(
        "word_book_cards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("book_id", sa.Integer(), nullable=False),
        sa.Column("vocab_item_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column(
            "added_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["book_id"], ["word_books.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["vocab_item_id"], ["vocab_items.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("book_id", "vocab_item_id", name="uq_word_book_cards_book_item"),
    )
    op.create_index(op.f("ix_word_book_cards_id"), "word_book_cards", ["id"], unique=False)
    op.create_index(
        op.f("ix_word_book_cards_book_id"), "word_book_cards", ["book_id"], unique=False
    )
    op.create_index(
        op.f("ix_word_book_cards_vocab_item_id"), "word_book_cards", ["vocab_item_id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("word_book_cards")
    op.drop_table("word_books")
    op.drop_table("mastery_records")
    op.drop_table("vocab_items")
    op.drop_table("users")
