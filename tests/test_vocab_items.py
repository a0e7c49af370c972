"""Tests for vocab items API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.conftest import create_mastery_record, create_test_vocab_item, create_test_word_book
from wordshelf import models


class TestCreateVocabItem:
    """Test suite for POST /vocab-items."""

    def test_create_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/vocab-items",
            json={
                "front": "ephemeral",
                "back": "lasting a very short time",
                "synonyms": ["fleeting", "transient"],
                "examples": [
                    {"sentence": "Fame is ephemeral.", "translation": "名聲是短暫的。"},
                    {"sentence": "An ephemeral stream."},
                ],
                "difficulty_level": "advanced",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        item = data["vocab_item"]
        assert item["front"] == "ephemeral"
        assert item["synonyms"] == ["fleeting", "transient"]
        assert [example["sentence"] for example in item["examples"]] == [
            "Fame is ephemeral.",
            "An ephemeral stream.",
        ]
        assert item["is_learned"] is False
        assert item["mastery"] is None

        db_item = db_session.query(models.VocabItem).filter_by(id=item["id"]).first()
        assert db_item is not None
        assert db_item.example_sentence_1 == "Fame is ephemeral."
        assert db_item.example_translation_1 == "名聲是短暫的。"
        assert db_item.example_sentence_2 == "An ephemeral stream."
        assert db_item.example_sentence_3 is None

    def test_create_duplicate_front(self, client: TestClient, db_session: Session) -> None:
        create_test_vocab_item(db_session, "ephemeral")

        response = client.post("/api/v1/vocab-items", json={"front": "ephemeral", "back": "x"})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_create_empty_front(self, client: TestClient) -> None:
        response = client.post("/api/v1/vocab-items", json={"front": "", "back": "meaning"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_whitespace_front(self, client: TestClient) -> None:
        response = client.post("/api/v1/vocab-items", json={"front": "   ", "back": "meaning"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_too_many_examples(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/vocab-items",
            json={
                "front": "word",
                "back": "meaning",
                "examples": [{"sentence": f"word {i}"} for i in range(4)],
            },
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestListVocabItems:
    """Test suite for GET /vocab-items."""

    def test_list_newest_first_with_mastery(self, client: TestClient, db_session: Session) -> None:
        first = create_test_vocab_item(db_session, "alpha")
        second = create_test_vocab_item(db_session, "beta")
        create_mastery_record(db_session, first, correct_streak=2, is_learned=True, review_count=2)

        response = client.get("/api/v1/vocab-items")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 2
        assert [item["id"] for item in data["vocab_items"]] == [second.id, first.id]
        learned = {item["front"]: item["is_learned"] for item in data["vocab_items"]}
        assert learned == {"alpha": True, "beta": False}

    def test_list_filter_learned(self, client: TestClient, db_session: Session) -> None:
        mastered = create_test_vocab_item(db_session, "alpha")
        create_test_vocab_item(db_session, "beta")
        create_mastery_record(db_session, mastered, correct_streak=2, is_learned=True)

        learned = client.get("/api/v1/vocab-items", params={"learned": True}).json()
        learning = client.get("/api/v1/vocab-items", params={"learned": False}).json()

        assert [item["front"] for item in learned["vocab_items"]] == ["alpha"]
        assert [item["front"] for item in learning["vocab_items"]] == ["beta"]

    def test_list_favorites_only(self, client: TestClient, db_session: Session) -> None:
        create_test_vocab_item(db_session, "alpha", is_favorite=True)
        create_test_vocab_item(db_session, "beta")

        data = client.get("/api/v1/vocab-items", params={"favorites_only": True}).json()

        assert [item["front"] for item in data["vocab_items"]] == ["alpha"]

    def test_list_excludes_other_users(self, client: TestClient, db_session: Session) -> None:
        other_user = models.User(id=2, email="other@example.com")
        db_session.add(other_user)
        db_session.commit()
        create_test_vocab_item(db_session, "theirs", user_id=other_user.id)
        create_test_vocab_item(db_session, "mine")

        data = client.get("/api/v1/vocab-items").json()

        assert [item["front"] for item in data["vocab_items"]] == ["mine"]


class TestGetVocabItem:
    def test_get_by_id(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha", translation="翻譯")

        response = client.get(f"/api/v1/vocab-items/{vocab_item.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["front"] == "alpha"
        assert data["examples"][0]["translation"] == "翻譯"

    def test_get_by_id_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/vocab-items/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"].lower()

    def test_get_other_users_item(self, client: TestClient, db_session: Session) -> None:
        other_user = models.User(id=2, email="other@example.com")
        db_session.add(other_user)
        db_session.commit()
        vocab_item = create_test_vocab_item(db_session, "theirs", user_id=other_user.id)

        response = client.get(f"/api/v1/vocab-items/{vocab_item.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_by_front(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "serendipity")

        response = client.get("/api/v1/vocab-items/by-front/serendipity")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == vocab_item.id

    def test_get_by_front_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/vocab-items/by-front/missing")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateVocabItem:
    """Test suite for PATCH /vocab-items/:id."""

    def test_partial_update(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha", back="first letter")

        response = client.patch(
            f"/api/v1/vocab-items/{vocab_item.id}", json={"phonetic": "/ˈælfə/"}
        )

        assert response.status_code == status.HTTP_200_OK
        item = response.json()["vocab_item"]
        assert item["phonetic"] == "/ˈælfə/"
        assert item["back"] == "first letter"
        assert len(item["examples"]) == 1

    def test_replace_examples(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")

        response = client.patch(
            f"/api/v1/vocab-items/{vocab_item.id}",
            json={"examples": [{"sentence": "Alpha comes first."}]},
        )

        assert response.status_code == status.HTTP_200_OK
        db_session.refresh(vocab_item)
        assert vocab_item.example_sentence_1 == "Alpha comes first."

    def test_update_empty_body(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")

        response = client.patch(f"/api/v1/vocab-items/{vocab_item.id}", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_front_to_existing(self, client: TestClient, db_session: Session) -> None:
        create_test_vocab_item(db_session, "alpha")
        beta = create_test_vocab_item(db_session, "beta")

        response = client.patch(f"/api/v1/vocab-items/{beta.id}", json={"front": "alpha"})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_update_not_found(self, client: TestClient) -> None:
        response = client.patch("/api/v1/vocab-items/99999", json={"back": "x"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_toggle_favorite(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")

        first = client.post(f"/api/v1/vocab-items/{vocab_item.id}/favorite")
        second = client.post(f"/api/v1/vocab-items/{vocab_item.id}/favorite")

        assert first.json()["vocab_item"]["is_favorite"] is True
        assert second.json()["vocab_item"]["is_favorite"] is False

    def test_mark_reviewed(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")
        create_mastery_record(db_session, vocab_item, correct_streak=1, review_count=3)

        response = client.post(f"/api/v1/vocab-items/{vocab_item.id}/reviewed")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["vocab_item"]
        assert data["last_reviewed_at"] is not None
        db_session.refresh(vocab_item)
        assert vocab_item.last_reviewed_at is not None
        record = db_session.query(models.MasteryRecord).one()
        assert record.review_count == 3
        assert record.correct_streak == 1

    def test_mark_reviewed_not_found(self, client: TestClient) -> None:
        response = client.post("/api/v1/vocab-items/99999/reviewed")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteVocabItem:
    def test_delete_removes_progress_and_cards(
        self, client: TestClient, db_session: Session
    ) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")
        create_mastery_record(db_session, vocab_item, correct_streak=1)
        book = create_test_word_book(db_session, vocab_items=[vocab_item])

        response = client.delete(f"/api/v1/vocab-items/{vocab_item.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        db_session.expire_all()
        assert db_session.query(models.VocabItem).count() == 0
        assert db_session.query(models.MasteryRecord).count() == 0
        assert db_session.query(models.WordBookCard).filter_by(book_id=book.id).count() == 0
        assert db_session.query(models.WordBook).filter_by(id=book.id).count() == 1

    def test_delete_not_found(self, client: TestClient) -> None:
        response = client.delete("/api/v1/vocab-items/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestMastery:
    """Test suite for /vocab-items/:id/mastery."""

    def test_get_mastery(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")
        create_mastery_record(db_session, vocab_item, correct_streak=1, review_count=3)

        response = client.get(f"/api/v1/vocab-items/{vocab_item.id}/mastery")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["correct_streak"] == 1
        assert data["review_count"] == 3
        assert data["is_learned"] is False

    def test_get_mastery_never_answered(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")

        response = client.get(f"/api/v1/vocab-items/{vocab_item.id}/mastery")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_reset_mastery(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")
        create_mastery_record(db_session, vocab_item, correct_streak=2, is_learned=True)

        response = client.delete(f"/api/v1/vocab-items/{vocab_item.id}/mastery")

        assert response.status_code == status.HTTP_200_OK
        listed = client.get("/api/v1/vocab-items", params={"learned": False}).json()
        assert [item["front"] for item in listed["vocab_items"]] == ["alpha"]

    def test_reset_mastery_without_progress(self, client: TestClient, db_session: Session) -> None:
        vocab_item = create_test_vocab_item(db_session, "alpha")

        response = client.delete(f"/api/v1/vocab-items/{vocab_item.id}/mastery")

        assert response.status_code == status.HTTP_404_NOT_FOUND
