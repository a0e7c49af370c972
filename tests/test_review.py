"""Tests for the read-aloud review API endpoint."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.conftest import create_mastery_record, create_test_vocab_item, create_test_word_book

PLAYLIST_URL = "/api/v1/review/playlist"


def _create_two_example_item(db_session: Session, front: str = "harbor"):
    return create_test_vocab_item(
        db_session,
        front,
        sentence="The ships stayed in the harbor overnight.",
        translation="船隻在港口過夜。",
        example_sentence_2="A quiet harbor at dawn.",
        example_translation_2=None,
    )


class TestReviewPlaylist:
    """Test suite for GET /review/playlist."""

    def test_single_english(self, client: TestClient, db_session: Session) -> None:
        vocab_item = _create_two_example_item(db_session)

        response = client.get(PLAYLIST_URL)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["play_mode"] == "single"
        assert data["language_mode"] == "english"
        assert [item["front"] for item in data["items"]] == ["harbor"]
        assert data["playlist"] == [
            {
                "text": "The ships stayed in the harbor overnight.",
                "lang": "en-US",
                "vocab_item_id": vocab_item.id,
                "example_index": 0,
                "is_translation": False,
            }
        ]

    def test_all_examples_with_translations(
        self, client: TestClient, db_session: Session
    ) -> None:
        _create_two_example_item(db_session)

        response = client.get(PLAYLIST_URL, params={"play_mode": "all", "language_mode": "both"})

        assert response.status_code == status.HTTP_200_OK
        playlist = response.json()["playlist"]
        # The second example has no translation, so nothing follows it
        assert [(u["text"], u["lang"], u["is_translation"]) for u in playlist] == [
            ("The ships stayed in the harbor overnight.", "en-US", False),
            ("船隻在港口過夜。", "zh-TW", True),
            ("A quiet harbor at dawn.", "en-US", False),
        ]
        assert [u["example_index"] for u in playlist] == [0, 0, 1]

    def test_items_without_examples_are_listed_but_silent(
        self, client: TestClient, db_session: Session
    ) -> None:
        create_test_vocab_item(db_session, "quiet", sentence=None)

        data = client.get(PLAYLIST_URL).json()

        assert [item["front"] for item in data["items"]] == ["quiet"]
        assert data["playlist"] == []

    def test_learned_items_excluded(self, client: TestClient, db_session: Session) -> None:
        learned = create_test_vocab_item(db_session, "learned")
        pending = create_test_vocab_item(db_session, "pending")
        create_mastery_record(db_session, learned, correct_streak=2, is_learned=True)
        create_mastery_record(db_session, pending, correct_streak=1)

        data = client.get(PLAYLIST_URL).json()

        assert [item["id"] for item in data["items"]] == [pending.id]
        assert {u["vocab_item_id"] for u in data["playlist"]} == {pending.id}

    def test_unreviewed_user_gets_everything(
        self, client: TestClient, db_session: Session
    ) -> None:
        first = create_test_vocab_item(db_session, "first")
        second = create_test_vocab_item(db_session, "second")

        data = client.get(PLAYLIST_URL).json()

        assert {item["id"] for item in data["items"]} == {first.id, second.id}

    def test_word_book_review_in_card_order(
        self, client: TestClient, db_session: Session
    ) -> None:
        first = create_test_vocab_item(db_session, "first")
        second = create_test_vocab_item(db_session, "second")
        create_test_vocab_item(db_session, "outside")
        book = create_test_word_book(db_session, vocab_items=[second, first])

        data = client.get(PLAYLIST_URL, params={"word_book_id": book.id}).json()

        assert [item["front"] for item in data["items"]] == ["second", "first"]

    def test_unknown_word_book(self, client: TestClient) -> None:
        response = client.get(PLAYLIST_URL, params={"word_book_id": 99999})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_invalid_play_mode(self, client: TestClient) -> None:
        response = client.get(PLAYLIST_URL, params={"play_mode": "shuffle"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
