"""Database models."""

from datetime import datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wordshelf.database import Base


class User(Base):
    """User account."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    vocab_items: Mapped[list["VocabItem"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    word_books: Mapped[list["WordBook"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of User."""
        return f"<User(id={self.id}, email='{self.email}')>"


class VocabItem(Base):
    """A word entry (the front of a flashcard plus its enrichment)."""

    __tablename__ = "vocab_items"
    __table_args__ = (UniqueConstraint("user_id", "front", name="uq_vocab_items_user_front"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    front: Mapped[str] = mapped_column(String(255), nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)
    phonetic: Mapped[str | None] = mapped_column(String(255), nullable=True)
    chinese_definition: Mapped[str | None] = mapped_column(Text, nullable=True)
    english_definition: Mapped[str | None] = mapped_column(Text, nullable=True)
    synonyms: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    antonyms: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    related_words: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    example_sentence_1: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_translation_1: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_source_1: Mapped[str | None] = mapped_column(String(500), nullable=True)
    example_sentence_2: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_translation_2: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_source_2: Mapped[str | None] = mapped_column(String(500), nullable=True)
    example_sentence_3: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_translation_3: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_source_3: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_favorite: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    difficulty_level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # Last time the card was flipped in study mode; quiz progress lives in mastery_records
    last_reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="vocab_items")
    mastery_records: Mapped[list["MasteryRecord"]] = relationship(
        back_populates="vocab_item", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        """String representation of VocabItem."""
        return f"<VocabItem(id={self.id}, front='{self.front}')>"


class MasteryRecord(Base):
    """Per-user quiz progress for a vocab item."""

    __tablename__ = "mastery_records"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    vocab_item_id: Mapped[int] = mapped_column(
        ForeignKey("vocab_items.id", ondelete="CASCADE"), primary_key=True
    )
    correct_streak: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_learned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    review_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    last_reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    vocab_item: Mapped[VocabItem] = relationship(back_populates="mastery_records")

    def __repr__(self) -> str:
        """String representation of MasteryRecord."""
        return (
            f"<MasteryRecord(user_id={self.user_id}, vocab_item_id={self.vocab_item_id}, "
            f"streak={self.correct_streak}, learned={self.is_learned})>"
        )


class WordBook(Base):
    """A user-curated collection of vocab items."""

    __tablename__ = "word_books"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    tag: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="word_books")
    cards: Mapped[list["WordBookCard"]] = relationship(
        back_populates="book",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WordBookCard.position",
    )

    def __repr__(self) -> str:
        """String representation of WordBook."""
        return f"<WordBook(id={self.id}, title='{self.title}')>"


class WordBookCard(Base):
    """Membership of a vocab item in a word-book."""

    __tablename__ = "word_book_cards"
    __table_args__ = (
        UniqueConstraint("book_id", "vocab_item_id", name="uq_word_book_cards_book_item"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    book_id: Mapped[int] = mapped_column(
        ForeignKey("word_books.id", ondelete="CASCADE"), index=True, nullable=False
    )
    vocab_item_id: Mapped[int] = mapped_column(
        ForeignKey("vocab_items.id", ondelete="CASCADE"), index=True, nullable=False
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    book: Mapped[WordBook] = relationship(back_populates="cards")
    vocab_item: Mapped[VocabItem] = relationship()

    def __repr__(self) -> str:
        """String representation of WordBookCard."""
        return (
            f"<WordBookCard(id={self.id}, book_id={self.book_id}, "
            f"vocab_item_id={self.vocab_item_id}, position={self.position})>"
        )
