"""Tests for the WordBook aggregate."""

from datetime import UTC, datetime

import pytest

from wordshelf.domain.common.exceptions import BusinessRuleViolationError, DomainError
from wordshelf.domain.common.value_objects import UserId, VocabItemId, WordBookCardId, WordBookId
from wordshelf.domain.library.entities import WordBook, WordBookCard


def _book(card_item_ids: list[int] | None = None) -> WordBook:
    now = datetime.now(UTC)
    cards = [
        WordBookCard(
            id=WordBookCardId(index + 1),
            book_id=WordBookId(1),
            vocab_item_id=VocabItemId(item_id),
            position=index,
        )
        for index, item_id in enumerate(card_item_ids or [])
    ]
    return WordBook.create_with_id(
        id=WordBookId(1),
        user_id=UserId(1),
        title="Travel",
        created_at=now,
        updated_at=now,
        cards=cards,
    )


class TestWordBookCreate:
    def test_title_and_tag_are_normalized(self) -> None:
        book = WordBook.create(UserId(1), "  Travel  ", tag="   ")

        assert book.title == "Travel"
        assert book.tag == "general"
        assert book.id.is_persisted is False

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(DomainError):
            WordBook.create(UserId(1), "   ")

    def test_rename(self) -> None:
        book = _book()

        book.rename(" Trips ")

        assert book.title == "Trips"
        with pytest.raises(DomainError):
            book.rename("")


class TestWordBookCards:
    def test_add_appends_after_last_position(self) -> None:
        book = _book([10, 11])

        added = book.add_cards([VocabItemId(12), VocabItemId(13)], max_cards=10)

        assert [card.position for card in added] == [2, 3]
        assert book.vocab_item_ids == [VocabItemId(i) for i in (10, 11, 12, 13)]
        assert book.card_count == 4

    def test_add_skips_existing_and_repeated_items(self) -> None:
        book = _book([10])

        added = book.add_cards(
            [VocabItemId(10), VocabItemId(11), VocabItemId(11)], max_cards=10
        )

        assert [card.vocab_item_id for card in added] == [VocabItemId(11)]
        assert book.card_count == 2

    def test_add_over_capacity_changes_nothing(self) -> None:
        book = _book([10, 11])

        with pytest.raises(BusinessRuleViolationError):
            book.add_cards([VocabItemId(12)], max_cards=2)

        assert book.card_count == 2
        assert book.vocab_item_ids == [VocabItemId(10), VocabItemId(11)]

    def test_remove_keeps_order_of_the_rest(self) -> None:
        book = _book([10, 11, 12])

        removed = book.remove_card(VocabItemId(11))

        assert removed is not None
        assert removed.vocab_item_id == VocabItemId(11)
        assert book.vocab_item_ids == [VocabItemId(10), VocabItemId(12)]
        assert book.remove_card(VocabItemId(11)) is None

    def test_position_after_removal_does_not_collide(self) -> None:
        book = _book([10, 11, 12])
        book.remove_card(VocabItemId(11))

        added = book.add_cards([VocabItemId(13)], max_cards=10)

        assert added[0].position == 3

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(DomainError):
            WordBookCard.create(WordBookId(1), VocabItemId(1), -1)
