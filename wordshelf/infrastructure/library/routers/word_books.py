"""API routes for word-book management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from wordshelf.application.library.use_cases.word_book_cards_use_case import (
    WordBookCardsUseCase,
)
from wordshelf.application.library.use_cases.word_book_management_use_case import (
    WordBookManagementUseCase,
)
from wordshelf.core import container
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.identity.entities.user import User
from wordshelf.domain.library.entities import WordBook as WordBookEntity
from wordshelf.exceptions import ValidationError, WordshelfError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.dependencies import get_current_user
from wordshelf.infrastructure.library.schemas import (
    WordBook,
    WordBookCard,
    WordBookCardsAddRequest,
    WordBookCardsAddResponse,
    WordBookCreateRequest,
    WordBookDeleteResponse,
    WordBookDetails,
    WordBookResponse,
    WordBooksListResponse,
    WordBookUpdateRequest,
)
from wordshelf.infrastructure.vocabulary.routers.vocab_items import to_vocab_item_schema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/word-books", tags=["word-books"])


def _to_schema(book: WordBookEntity) -> WordBook:
    return WordBook(
        id=book.id.value,
        user_id=book.user_id.value,
        title=book.title,
        description=book.description,
        tag=book.tag,
        cover_image_url=book.cover_image_url,
        card_count=book.card_count,
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


@router.get("", response_model=WordBooksListResponse, status_code=status.HTTP_200_OK)
def list_word_books(
    current_user: Annotated[User, Depends(get_current_user)],
    tag: Annotated[str | None, Query(description="Only word-books with this tag")] = None,
    use_case: WordBookManagementUseCase = Depends(
        inject_use_case(container.word_book_management_use_case)
    ),
) -> WordBooksListResponse:
    try:
        books = use_case.list_word_books(current_user.id.value, tag=tag)
        return WordBooksListResponse(word_books=[_to_schema(book) for book in books])
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to list word-books: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=WordBookResponse, status_code=status.HTTP_201_CREATED)
def create_word_book(
    request: WordBookCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordBookManagementUseCase = Depends(
        inject_use_case(container.word_book_management_use_case)
    ),
) -> WordBookResponse:
    try:
        book = use_case.create_word_book(
            user_id=current_user.id.value,
            title=request.title,
            description=request.description,
            tag=request.tag,
            cover_image_url=request.cover_image_url,
        )
        return WordBookResponse(
            success=True, message="Word-book created successfully", word_book=_to_schema(book)
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to create word-book: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{book_id}", response_model=WordBookDetails, status_code=status.HTTP_200_OK)
def get_word_book(
    book_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordBookManagementUseCase = Depends(
        inject_use_case(container.word_book_management_use_case)
    ),
) -> WordBookDetails:
    """Get a word-book with its cards ordered by position."""
    try:
        details = use_case.get_word_book(book_id, current_user.id.value)
        items_by_id = {item.id: item for item in details.vocab_items}
        cards = [
            WordBookCard(
                position=card.position,
                added_at=card.added_at,
                vocab_item=to_vocab_item_schema(items_by_id[card.vocab_item_id]),
            )
            for card in sorted(details.book.cards, key=lambda c: c.position)
            if card.vocab_item_id in items_by_id
        ]
        return WordBookDetails(**_to_schema(details.book).model_dump(), cards=cards)
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get word-book {book_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{book_id}", response_model=WordBookResponse, status_code=status.HTTP_200_OK)
def update_word_book(
    book_id: int,
    request: WordBookUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordBookManagementUseCase = Depends(
        inject_use_case(container.word_book_management_use_case)
    ),
) -> WordBookResponse:
    try:
        book = use_case.update_word_book(
            book_id=book_id,
            user_id=current_user.id.value,
            title=request.title,
            description=request.description,
            tag=request.tag,
            cover_image_url=request.cover_image_url,
        )
        return WordBookResponse(
            success=True, message="Word-book updated successfully", word_book=_to_schema(book)
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to update word-book {book_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{book_id}", response_model=WordBookDeleteResponse, status_code=status.HTTP_200_OK)
def delete_word_book(
    book_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordBookManagementUseCase = Depends(
        inject_use_case(container.word_book_management_use_case)
    ),
) -> WordBookDeleteResponse:
    """Delete a word-book. Its vocab items are kept."""
    try:
        use_case.delete_word_book(book_id, current_user.id.value)
        return WordBookDeleteResponse(success=True, message="Word-book deleted successfully")
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete word-book {book_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{book_id}/cards", response_model=WordBookCardsAddResponse, status_code=status.HTTP_200_OK
)
def add_cards(
    book_id: int,
    request: WordBookCardsAddRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordBookCardsUseCase = Depends(inject_use_case(container.word_book_cards_use_case)),
) -> WordBookCardsAddResponse:
    """
    Append vocab items to a word-book.

    Items already in the book are skipped. Rejected with 400 when the book
    would exceed its card limit.
    """
    try:
        book, added = use_case.add_cards(book_id, current_user.id.value, request.vocab_item_ids)
        skipped = len(request.vocab_item_ids) - len(added)
        return WordBookCardsAddResponse(
            success=True,
            message=f"Added {len(added)} cards",
            added=len(added),
            skipped=skipped,
            word_book=_to_schema(book),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to add cards to word-book {book_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{book_id}/cards/{vocab_item_id}",
    response_model=WordBookResponse,
    status_code=status.HTTP_200_OK,
)
def remove_card(
    book_id: int,
    vocab_item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordBookCardsUseCase = Depends(inject_use_case(container.word_book_cards_use_case)),
) -> WordBookResponse:
    try:
        book = use_case.remove_card(book_id, current_user.id.value, vocab_item_id)
        return WordBookResponse(
            success=True, message="Card removed successfully", word_book=_to_schema(book)
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to remove vocab item {vocab_item_id} from word-book {book_id}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
