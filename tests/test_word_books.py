"""Tests for word-books API endpoints."""

from dependency_injector import providers
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.conftest import create_test_vocab_item, create_test_word_book
from wordshelf import models
from wordshelf.application.library.use_cases.word_book_cards_use_case import WordBookCardsUseCase
from wordshelf.core import container


class TestWordBookCrud:
    """Test suite for /word-books."""

    def test_create_word_book(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/word-books", json={"title": "  GRE  ", "description": "Exam words"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        book = response.json()["word_book"]
        assert book["title"] == "GRE"
        assert book["tag"] == "general"
        assert book["card_count"] == 0
        assert db_session.query(models.WordBook).filter_by(id=book["id"]).count() == 1

    def test_create_word_book_without_title(self, client: TestClient) -> None:
        response = client.post("/api/v1/word-books", json={"title": ""})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_list_word_books_with_counts(self, client: TestClient, db_session: Session) -> None:
        items = [create_test_vocab_item(db_session, front) for front in ("a1", "a2", "a3")]
        older = create_test_word_book(db_session, "Older", vocab_items=items[:2])
        newer = create_test_word_book(db_session, "Newer", vocab_items=items, tag="travel")

        data = client.get("/api/v1/word-books").json()

        assert [(book["id"], book["card_count"]) for book in data["word_books"]] == [
            (newer.id, 3),
            (older.id, 2),
        ]

    def test_list_word_books_by_tag(self, client: TestClient, db_session: Session) -> None:
        create_test_word_book(db_session, "General")
        create_test_word_book(db_session, "Trip", tag="travel")

        data = client.get("/api/v1/word-books", params={"tag": "travel"}).json()

        assert [book["title"] for book in data["word_books"]] == ["Trip"]

    def test_get_word_book_cards_in_order(self, client: TestClient, db_session: Session) -> None:
        first = create_test_vocab_item(db_session, "first")
        second = create_test_vocab_item(db_session, "second")
        book = create_test_word_book(db_session, vocab_items=[second, first])

        response = client.get(f"/api/v1/word-books/{book.id}")

        assert response.status_code == status.HTTP_200_OK
        cards = response.json()["cards"]
        assert [card["vocab_item"]["front"] for card in cards] == ["second", "first"]
        assert [card["position"] for card in cards] == [0, 1]

    def test_get_word_book_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/word-books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_word_book(self, client: TestClient, db_session: Session) -> None:
        book = create_test_word_book(db_session, "Old title")

        response = client.put(
            f"/api/v1/word-books/{book.id}", json={"title": "New title", "tag": "exam"}
        )

        assert response.status_code == status.HTTP_200_OK
        updated = response.json()["word_book"]
        assert updated["title"] == "New title"
        assert updated["tag"] == "exam"

    def test_delete_word_book_keeps_vocab_items(
        self, client: TestClient, db_session: Session
    ) -> None:
        vocab_item = create_test_vocab_item(db_session, "kept")
        book = create_test_word_book(db_session, vocab_items=[vocab_item])

        response = client.delete(f"/api/v1/word-books/{book.id}")

        assert response.status_code == status.HTTP_200_OK
        db_session.expire_all()
        assert db_session.query(models.WordBook).count() == 0
        assert db_session.query(models.WordBookCard).count() == 0
        assert db_session.query(models.VocabItem).filter_by(id=vocab_item.id).count() == 1


class TestWordBookCards:
    """Test suite for /word-books/:id/cards."""

    def test_add_cards_appends_after_last(self, client: TestClient, db_session: Session) -> None:
        existing = create_test_vocab_item(db_session, "existing")
        new_one = create_test_vocab_item(db_session, "new-one")
        new_two = create_test_vocab_item(db_session, "new-two")
        book = create_test_word_book(db_session, vocab_items=[existing])

        response = client.post(
            f"/api/v1/word-books/{book.id}/cards",
            json={"vocab_item_ids": [new_one.id, existing.id, new_two.id]},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["added"] == 2
        assert data["skipped"] == 1
        assert data["word_book"]["card_count"] == 3

        cards = client.get(f"/api/v1/word-books/{book.id}").json()["cards"]
        assert [(card["vocab_item"]["front"], card["position"]) for card in cards] == [
            ("existing", 0),
            ("new-one", 1),
            ("new-two", 2),
        ]

    def test_add_unknown_vocab_item(self, client: TestClient, db_session: Session) -> None:
        book = create_test_word_book(db_session)

        response = client.post(
            f"/api/v1/word-books/{book.id}/cards", json={"vocab_item_ids": [99999]}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_add_cards_over_capacity(self, client: TestClient, db_session: Session) -> None:
        items = [create_test_vocab_item(db_session, f"word-{i}") for i in range(3)]
        book = create_test_word_book(db_session, vocab_items=items[:2])

        with container.word_book_cards_use_case.override(
            providers.Factory(
                WordBookCardsUseCase,
                word_book_repository=container.word_book_repository,
                vocab_item_repository=container.vocab_item_repository,
                max_cards_per_book=2,
            )
        ):
            response = client.post(
                f"/api/v1/word-books/{book.id}/cards", json={"vocab_item_ids": [items[2].id]}
            )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "at most 2 cards" in response.json()["detail"]
        db_session.expire_all()
        assert db_session.query(models.WordBookCard).filter_by(book_id=book.id).count() == 2

    def test_remove_card(self, client: TestClient, db_session: Session) -> None:
        first = create_test_vocab_item(db_session, "first")
        second = create_test_vocab_item(db_session, "second")
        book = create_test_word_book(db_session, vocab_items=[first, second])

        response = client.delete(f"/api/v1/word-books/{book.id}/cards/{first.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["word_book"]["card_count"] == 1
        cards = client.get(f"/api/v1/word-books/{book.id}").json()["cards"]
        assert [card["vocab_item"]["front"] for card in cards] == ["second"]

    def test_remove_card_not_in_book(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "loose")
        book = create_test_word_book(db_session)

        response = client.delete(f"/api/v1/word-books/{book.id}/cards/{vocab_item.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
