from dataclasses import dataclass, field
from datetime import UTC, datetime

from wordshelf.domain.common.entity import Entity
from wordshelf.domain.common.exceptions import BusinessRuleViolationError, DomainError
from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId, WordBookId

from .word_book_card import WordBookCard

DEFAULT_TAG = "general"


@dataclass
class WordBook(Entity[WordBookId]):
    """
    Word-book aggregate root.

    A user-curated, ordered collection of vocab items. Cards are loaded
    with the book when its contents are needed; list views only carry
    `card_count`.
    """

    # Identity
    id: WordBookId
    user_id: UserId

    title: str

    created_at: datetime
    updated_at: datetime

    description: str | None = None
    cover_image_url: str | None = None
    tag: str | None = DEFAULT_TAG
    cards: list[WordBookCard] = field(default_factory=list)
    card_count: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise DomainError("Word-book title cannot be empty")

    def contains(self, vocab_item_id: VocabItemId) -> bool:
        return any(card.vocab_item_id == vocab_item_id for card in self.cards)

    @property
    def vocab_item_ids(self) -> list[VocabItemId]:
        """Item ids in card order."""
        return [card.vocab_item_id for card in sorted(self.cards, key=lambda c: c.position)]

    def rename(self, title: str) -> None:
        if not title or not title.strip():
            raise DomainError("Word-book title cannot be empty")
        self.title = title.strip()
        self.updated_at = datetime.now(UTC)

    def update_details(
        self,
        description: str | None = None,
        tag: str | None = None,
        cover_image_url: str | None = None,
    ) -> None:
        if description is not None:
            self.description = description
        if tag is not None:
            self.tag = tag.strip() or DEFAULT_TAG
        if cover_image_url is not None:
            self.cover_image_url = cover_image_url
        self.updated_at = datetime.now(UTC)

    def add_cards(self, vocab_item_ids: list[VocabItemId], max_cards: int) -> list[WordBookCard]:
        """
        Append cards for the given items after the current last position.

        Items already in the book (or repeated in the request) are skipped.

        Raises:
            BusinessRuleViolationError: If the book would exceed max_cards
        """
        new_ids: list[VocabItemId] = []
        for item_id in vocab_item_ids:
            if not self.contains(item_id) and item_id not in new_ids:
                new_ids.append(item_id)

        if len(self.cards) + len(new_ids) > max_cards:
            raise BusinessRuleViolationError(
                "word_book_capacity",
                f"A word-book can hold at most {max_cards} cards",
            )

        next_position = max((card.position for card in self.cards), default=-1) + 1
        added = [
            WordBookCard.create(self.id, item_id, next_position + offset)
            for offset, item_id in enumerate(new_ids)
        ]
        self.cards.extend(added)
        self.card_count = len(self.cards)
        return added

    def remove_card(self, vocab_item_id: VocabItemId) -> WordBookCard | None:
        for card in self.cards:
            if card.vocab_item_id == vocab_item_id:
                self.cards.remove(card)
                self.card_count = len(self.cards)
                return card
        return None

    @classmethod
    def create(
        cls,
        user_id: UserId,
        title: str,
        description: str | None = None,
        tag: str | None = None,
        cover_image_url: str | None = None,
    ) -> "WordBook":
        """Factory for creating a new word-book."""
        if not title or not title.strip():
            raise DomainError("Word-book title cannot be empty")
        now = datetime.now(UTC)
        return cls(
            id=WordBookId.generate(),
            user_id=user_id,
            title=title.strip(),
            description=description,
            cover_image_url=cover_image_url,
            tag=(tag.strip() if tag and tag.strip() else DEFAULT_TAG),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: WordBookId,
        user_id: UserId,
        title: str,
        created_at: datetime,
        updated_at: datetime,
        description: str | None = None,
        cover_image_url: str | None = None,
        tag: str | None = DEFAULT_TAG,
        cards: list[WordBookCard] | None = None,
        card_count: int | None = None,
    ) -> "WordBook":
        """Factory for reconstituting a word-book from persistence."""
        cards = cards or []
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            description=description,
            cover_image_url=cover_image_url,
            tag=tag,
            created_at=created_at,
            updated_at=updated_at,
            cards=cards,
            card_count=card_count if card_count is not None else len(cards),
        )
