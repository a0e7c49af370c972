"""API routes for vocab item management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from wordshelf.application.vocabulary.use_cases.create_vocab_item_use_case import (
    CreateVocabItemUseCase,
)
from wordshelf.application.vocabulary.use_cases.delete_vocab_item_use_case import (
    DeleteVocabItemUseCase,
)
from wordshelf.application.vocabulary.use_cases.dtos import VocabItemData, VocabItemWithMastery
from wordshelf.application.vocabulary.use_cases.get_vocab_items_use_case import (
    GetVocabItemsUseCase,
)
from wordshelf.application.vocabulary.use_cases.update_vocab_item_use_case import (
    UpdateVocabItemUseCase,
)
from wordshelf.core import container
from wordshelf.dependencies import ensure_ai_enabled
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.identity.entities.user import User
from wordshelf.domain.vocabulary.entities import VocabItem as VocabItemEntity
from wordshelf.exceptions import ValidationError, WordshelfError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.dependencies import get_current_user
from wordshelf.infrastructure.learning.schemas import MasteryRecordResponse
from wordshelf.infrastructure.vocabulary.schemas import (
    ExampleSentence,
    VocabItem,
    VocabItemCreateRequest,
    VocabItemDeleteResponse,
    VocabItemResponse,
    VocabItemsListResponse,
    VocabItemUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vocab-items", tags=["vocab-items"])


def to_vocab_item_schema(
    vocab_item: VocabItemEntity, result: VocabItemWithMastery | None = None
) -> VocabItem:
    """Manually construct the response schema from a domain entity."""
    mastery = result.mastery if result else None
    return VocabItem(
        id=vocab_item.id.value,
        user_id=vocab_item.user_id.value,
        front=vocab_item.front,
        back=vocab_item.back,
        phonetic=vocab_item.phonetic,
        chinese_definition=vocab_item.chinese_definition,
        english_definition=vocab_item.english_definition,
        synonyms=list(vocab_item.synonyms),
        antonyms=list(vocab_item.antonyms),
        related_words=list(vocab_item.related_words),
        image_url=vocab_item.image_url,
        examples=[ExampleSentence.from_entity(example) for example in vocab_item.examples],
        is_favorite=vocab_item.is_favorite,
        tags=list(vocab_item.tags),
        difficulty_level=vocab_item.difficulty_level,
        is_learned=result.is_learned if result else False,
        mastery=MasteryRecordResponse.from_record(mastery) if mastery else None,
        last_reviewed_at=vocab_item.last_reviewed_at,
        created_at=vocab_item.created_at,
        updated_at=vocab_item.updated_at,
    )


@router.get("", response_model=VocabItemsListResponse, status_code=status.HTTP_200_OK)
def list_vocab_items(
    current_user: Annotated[User, Depends(get_current_user)],
    learned: Annotated[
        bool | None, Query(description="Only mastered (true) or not yet mastered (false) items")
    ] = None,
    favorites_only: Annotated[bool, Query(description="Only favorite items")] = False,
    use_case: GetVocabItemsUseCase = Depends(inject_use_case(container.get_vocab_items_use_case)),
) -> VocabItemsListResponse:
    """List the user's vocab items, newest first."""
    try:
        results = use_case.list_vocab_items(
            user_id=current_user.id.value, learned=learned, favorites_only=favorites_only
        )
        items = [to_vocab_item_schema(result.vocab_item, result) for result in results]
        return VocabItemsListResponse(vocab_items=items, total=len(items))
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to list vocab items: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=VocabItemResponse, status_code=status.HTTP_201_CREATED)
async def create_vocab_item(
    request: VocabItemCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: CreateVocabItemUseCase = Depends(
        inject_use_case(container.create_vocab_item_use_case)
    ),
) -> VocabItemResponse:
    """
    Create a vocab item.

    With `autofill`, the word is looked up and the fields left empty are filled
    in from the result. Autofill requires AI features to be enabled.
    """
    if request.autofill:
        ensure_ai_enabled()

    try:
        vocab_item = await use_case.create_vocab_item(
            user_id=current_user.id.value,
            data=VocabItemData(
                front=request.front,
                back=request.back,
                phonetic=request.phonetic,
                chinese_definition=request.chinese_definition,
                english_definition=request.english_definition,
                synonyms=request.synonyms,
                antonyms=request.antonyms,
                related_words=request.related_words,
                image_url=request.image_url,
                examples=[example.to_entity() for example in request.examples],
                is_favorite=request.is_favorite,
                tags=request.tags,
                difficulty_level=request.difficulty_level,
            ),
            autofill=request.autofill,
        )
        return VocabItemResponse(
            success=True,
            message="Vocab item created successfully",
            vocab_item=to_vocab_item_schema(vocab_item),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to create vocab item '{request.front}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/by-front/{front}", response_model=VocabItem, status_code=status.HTTP_200_OK)
def get_vocab_item_by_front(
    front: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetVocabItemsUseCase = Depends(inject_use_case(container.get_vocab_items_use_case)),
) -> VocabItem:
    """Get a vocab item by its headword."""
    try:
        result = use_case.get_vocab_item_by_front(front, current_user.id.value)
        return to_vocab_item_schema(result.vocab_item, result)
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get vocab item '{front}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{vocab_item_id}", response_model=VocabItem, status_code=status.HTTP_200_OK)
def get_vocab_item(
    vocab_item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetVocabItemsUseCase = Depends(inject_use_case(container.get_vocab_items_use_case)),
) -> VocabItem:
    try:
        result = use_case.get_vocab_item(vocab_item_id, current_user.id.value)
        return to_vocab_item_schema(result.vocab_item, result)
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get vocab item {vocab_item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{vocab_item_id}", response_model=VocabItemResponse, status_code=status.HTTP_200_OK)
@router.patch("/{vocab_item_id}", response_model=VocabItemResponse, status_code=status.HTTP_200_OK)
def update_vocab_item(
    vocab_item_id: int,
    request: VocabItemUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UpdateVocabItemUseCase = Depends(
        inject_use_case(container.update_vocab_item_use_case)
    ),
) -> VocabItemResponse:
    """
    Update a vocab item. Only the fields present in the body are changed.

    Raises:
        HTTPException: 400 if the body is empty, 409 if the new headword is taken
    """
    changes = request.model_dump(exclude_unset=True)
    if "examples" in changes:
        changes["examples"] = [example.to_entity() for example in request.examples or []]

    try:
        vocab_item = use_case.update_vocab_item(
            vocab_item_id=vocab_item_id, user_id=current_user.id.value, changes=changes
        )
        return VocabItemResponse(
            success=True,
            message="Vocab item updated successfully",
            vocab_item=to_vocab_item_schema(vocab_item),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to update vocab item {vocab_item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{vocab_item_id}/favorite", response_model=VocabItemResponse, status_code=status.HTTP_200_OK
)
def toggle_favorite(
    vocab_item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UpdateVocabItemUseCase = Depends(
        inject_use_case(container.update_vocab_item_use_case)
    ),
) -> VocabItemResponse:
    try:
        vocab_item = use_case.toggle_favorite(vocab_item_id, current_user.id.value)
        return VocabItemResponse(
            success=True,
            message="Added to favorites" if vocab_item.is_favorite else "Removed from favorites",
            vocab_item=to_vocab_item_schema(vocab_item),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to toggle favorite on {vocab_item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{vocab_item_id}/reviewed", response_model=VocabItemResponse, status_code=status.HTTP_200_OK
)
def mark_vocab_item_reviewed(
    vocab_item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: UpdateVocabItemUseCase = Depends(
        inject_use_case(container.update_vocab_item_use_case)
    ),
) -> VocabItemResponse:
    """Study mode: record that the card was flipped. Quiz mastery is left alone."""
    try:
        vocab_item = use_case.mark_reviewed(vocab_item_id, current_user.id.value)
        return VocabItemResponse(
            success=True,
            message="Marked as reviewed",
            vocab_item=to_vocab_item_schema(vocab_item),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to mark vocab item {vocab_item_id} reviewed: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{vocab_item_id}", response_model=VocabItemDeleteResponse, status_code=status.HTTP_200_OK
)
def delete_vocab_item(
    vocab_item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DeleteVocabItemUseCase = Depends(
        inject_use_case(container.delete_vocab_item_use_case)
    ),
) -> VocabItemDeleteResponse:
    """Delete a vocab item together with its quiz progress and word-book cards."""
    try:
        use_case.delete_vocab_item(vocab_item_id=vocab_item_id, user_id=current_user.id.value)
        return VocabItemDeleteResponse(success=True, message="Vocab item deleted successfully")
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete vocab item {vocab_item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
