"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("COOKIE_SECURE", "false")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from wordshelf import models  # noqa: E402
from wordshelf.core import container  # noqa: E402
from wordshelf.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from wordshelf.domain.common.value_objects.ids import UserId  # noqa: E402
from wordshelf.domain.identity.entities.user import User  # noqa: E402
from wordshelf.infrastructure.identity.dependencies import get_current_user  # noqa: E402
from wordshelf.infrastructure.identity.routers import auth, users  # noqa: E402
from wordshelf.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so every thread sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool
)

event.listen(test_engine, "connect", enable_sqlite_foreign_keys)


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

DEFAULT_USER_ID = 1


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    user = models.User(id=DEFAULT_USER_ID, email="test@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture(autouse=True)
def _reset_process_state() -> Generator[None, None, None]:
    """Quiz sessions and rate limits live in memory across requests."""
    container.quiz_session_store().clear()
    auth.limiter.reset()
    users.limiter.reset()
    yield
    container.quiz_session_store().clear()


def _override_get_db(db_session: Session) -> Any:  # noqa: ANN401
    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    return override_get_db


@pytest.fixture
def client(db_session: Session, test_user: models.User) -> Generator[TestClient, Any, None]:
    """Create a test client authenticated as test_user."""

    def override_get_current_user() -> User:
        return User.create_with_id(
            id=UserId(test_user.id),
            email=test_user.email,
            hashed_password=test_user.hashed_password,
            created_at=test_user.created_at,
            updated_at=test_user.updated_at,
        )

    app.dependency_overrides[get_db] = _override_get_db(db_session)
    app.dependency_overrides[get_current_user] = override_get_current_user

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client that goes through real token authentication."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_vocab_item(
    db_session: Session,
    front: str,
    back: str | None = None,
    user_id: int = DEFAULT_USER_ID,
    sentence: str | None = "",
    translation: str | None = None,
    **columns: Any,  # noqa: ANN401
) -> models.VocabItem:
    """
    Insert a vocab item.

    By default the item gets one example sentence containing its headword;
    pass sentence=None for an item without examples.
    """
    if sentence == "":
        sentence = f"I looked up {front} in the dictionary."
    vocab_item = models.VocabItem(
        user_id=user_id,
        front=front,
        back=back or f"meaning of {front}",
        synonyms=[],
        antonyms=[],
        related_words=[],
        tags=[],
        example_sentence_1=sentence,
        example_translation_1=translation,
        **columns,
    )
    db_session.add(vocab_item)
    db_session.commit()
    db_session.refresh(vocab_item)
    return vocab_item


def create_test_word_book(
    db_session: Session,
    title: str = "Test Book",
    user_id: int = DEFAULT_USER_ID,
    vocab_items: list[models.VocabItem] | None = None,
    tag: str | None = "general",
) -> models.WordBook:
    book = models.WordBook(user_id=user_id, title=title, tag=tag)
    for position, vocab_item in enumerate(vocab_items or []):
        book.cards.append(models.WordBookCard(vocab_item_id=vocab_item.id, position=position))
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


def create_mastery_record(
    db_session: Session,
    vocab_item: models.VocabItem,
    correct_streak: int = 0,
    is_learned: bool = False,
    review_count: int = 1,
) -> models.MasteryRecord:
    record = models.MasteryRecord(
        user_id=vocab_item.user_id,
        vocab_item_id=vocab_item.id,
        correct_streak=correct_streak,
        is_learned=is_learned,
        review_count=review_count,
    )
    db_session.add(record)
    db_session.commit()
    return record
