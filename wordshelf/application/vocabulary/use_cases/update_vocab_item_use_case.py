"""Use case for updating vocab items."""

from typing import Any

import structlog

from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.domain.vocabulary.entities import VocabItem
from wordshelf.domain.vocabulary.exceptions import DuplicateHeadwordError
from wordshelf.exceptions import ValidationError, VocabItemNotFoundError

logger = structlog.get_logger(__name__)

# Attributes assigned as given; front, back and examples go through entity methods
_PLAIN_FIELDS = frozenset(
    {
        "phonetic",
        "chinese_definition",
        "english_definition",
        "synonyms",
        "antonyms",
        "related_words",
        "image_url",
        "is_favorite",
        "tags",
        "difficulty_level",
    }
)
_UPDATABLE_FIELDS = _PLAIN_FIELDS | {"front", "back", "examples"}


class UpdateVocabItemUseCase:
    """Use case for partial updates of vocab items."""

    def __init__(self, vocab_item_repository: VocabItemRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.vocab_item_repository = vocab_item_repository

    def _get_owned(self, vocab_item_id: int, user_id: int) -> VocabItem:
        vocab_item = self.vocab_item_repository.find_by_id(
            VocabItemId(vocab_item_id), UserId(user_id)
        )
        if not vocab_item:
            raise VocabItemNotFoundError(vocab_item_id)
        return vocab_item

    def update_vocab_item(
        self, vocab_item_id: int, user_id: int, changes: dict[str, Any]
    ) -> VocabItem:
        """
        Apply the given field changes to a vocab item.

        Args:
            vocab_item_id: ID of the item to update
            user_id: ID of the owner
            changes: Field name to new value, only for the fields being changed

        Raises:
            VocabItemNotFoundError: If the item is not found
            ValidationError: If no changes or unknown fields are given
            DuplicateHeadwordError: If the new front is already used by another item
        """
        if not changes:
            raise ValidationError("At least one field must be provided", status_code=400)
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown fields: {', '.join(sorted(unknown))}", status_code=400
            )

        vocab_item = self._get_owned(vocab_item_id, user_id)

        if "front" in changes and changes["front"] != vocab_item.front:
            vocab_item.update_front(changes["front"])
            existing = self.vocab_item_repository.find_by_front(
                vocab_item.front, vocab_item.user_id
            )
            if existing and existing.id != vocab_item.id:
                raise DuplicateHeadwordError(vocab_item.front)
        if "back" in changes:
            vocab_item.update_back(changes["back"])
        if "examples" in changes:
            vocab_item.replace_examples(changes["examples"] or [])
        for name in _PLAIN_FIELDS & set(changes):
            value = changes[name]
            if name in {"synonyms", "antonyms", "related_words", "tags"}:
                value = list(value or [])
            setattr(vocab_item, name, value)

        vocab_item = self.vocab_item_repository.save(vocab_item)

        logger.info(
            "updated_vocab_item", vocab_item_id=vocab_item_id, fields=sorted(changes)
        )
        return vocab_item

    def toggle_favorite(self, vocab_item_id: int, user_id: int) -> VocabItem:
        """
        Raises:
            VocabItemNotFoundError: If the item is not found
        """
        vocab_item = self._get_owned(vocab_item_id, user_id)
        is_favorite = vocab_item.toggle_favorite()
        vocab_item = self.vocab_item_repository.save(vocab_item)

        logger.info(
            "toggled_vocab_item_favorite", vocab_item_id=vocab_item_id, is_favorite=is_favorite
        )
        return vocab_item

    def mark_reviewed(self, vocab_item_id: int, user_id: int) -> VocabItem:
        """
        Stamp the item as studied now, as when its card is flipped.

        Raises:
            VocabItemNotFoundError: If the item is not found
        """
        vocab_item = self._get_owned(vocab_item_id, user_id)
        reviewed_at = vocab_item.mark_reviewed()
        vocab_item = self.vocab_item_repository.save(vocab_item)

        logger.info(
            "marked_vocab_item_reviewed", vocab_item_id=vocab_item_id, reviewed_at=reviewed_at
        )
        return vocab_item
