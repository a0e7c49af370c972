from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from wordshelf.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from wordshelf.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from wordshelf.application.learning.services.quiz_session_store import QuizSessionStore
from wordshelf.application.learning.use_cases.mastery_use_case import MasteryUseCase
from wordshelf.application.learning.use_cases.pool_loader import StudyPoolLoader
from wordshelf.application.learning.use_cases.quiz_use_case import QuizUseCase
from wordshelf.application.learning.use_cases.review_use_case import ReviewUseCase
from wordshelf.application.library.use_cases.word_book_cards_use_case import (
    WordBookCardsUseCase,
)
from wordshelf.application.library.use_cases.word_book_management_use_case import (
    WordBookManagementUseCase,
)
from wordshelf.application.vocabulary.use_cases.create_vocab_item_use_case import (
    CreateVocabItemUseCase,
)
from wordshelf.application.vocabulary.use_cases.delete_vocab_item_use_case import (
    DeleteVocabItemUseCase,
)
from wordshelf.application.vocabulary.use_cases.get_vocab_items_use_case import (
    GetVocabItemsUseCase,
)
from wordshelf.application.vocabulary.use_cases.update_vocab_item_use_case import (
    UpdateVocabItemUseCase,
)
from wordshelf.application.vocabulary.use_cases.word_info_use_case import WordInfoUseCase
from wordshelf.config import get_settings
from wordshelf.domain.learning.services import MasteryTracker
from wordshelf.infrastructure.ai.ai_service import AIWordInfoService
from wordshelf.infrastructure.identity.repositories.user_repository import UserRepository
from wordshelf.infrastructure.identity.services import (
    PasswordServiceAdapter,
    TokenServiceAdapter,
)
from wordshelf.infrastructure.learning.repositories.mastery_repository import MasteryRepository
from wordshelf.infrastructure.library.repositories.word_book_repository import (
    WordBookRepository,
)
from wordshelf.infrastructure.vocabulary.repositories.vocab_item_repository import (
    VocabItemRepository,
)

settings = get_settings()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db)
    vocab_item_repository = providers.Factory(VocabItemRepository, db=db)
    word_book_repository = providers.Factory(WordBookRepository, db=db)
    mastery_repository = providers.Factory(MasteryRepository, db=db)

    # Identity services
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)

    # External collaborators
    word_info_service = providers.Singleton(AIWordInfoService)

    # Process-wide state
    quiz_session_store = providers.Singleton(
        QuizSessionStore, timeout_minutes=settings.QUIZ_SESSION_TIMEOUT_MINUTES
    )

    # Domain services (pure domain logic, no db)
    mastery_tracker = providers.Factory(MasteryTracker)

    study_pool_loader = providers.Factory(
        StudyPoolLoader,
        vocab_item_repository=vocab_item_repository,
        word_book_repository=word_book_repository,
    )

    # Vocabulary module, application use cases
    create_vocab_item_use_case = providers.Factory(
        CreateVocabItemUseCase,
        vocab_item_repository=vocab_item_repository,
        word_info_service=word_info_service,
    )
    get_vocab_items_use_case = providers.Factory(
        GetVocabItemsUseCase,
        vocab_item_repository=vocab_item_repository,
        mastery_repository=mastery_repository,
    )
    update_vocab_item_use_case = providers.Factory(
        UpdateVocabItemUseCase,
        vocab_item_repository=vocab_item_repository,
    )
    delete_vocab_item_use_case = providers.Factory(
        DeleteVocabItemUseCase,
        vocab_item_repository=vocab_item_repository,
    )
    word_info_use_case = providers.Factory(
        WordInfoUseCase,
        word_info_service=word_info_service,
    )

    # Library module, application use cases
    word_book_management_use_case = providers.Factory(
        WordBookManagementUseCase,
        word_book_repository=word_book_repository,
        vocab_item_repository=vocab_item_repository,
    )
    word_book_cards_use_case = providers.Factory(
        WordBookCardsUseCase,
        word_book_repository=word_book_repository,
        vocab_item_repository=vocab_item_repository,
        max_cards_per_book=settings.MAX_CARDS_PER_BOOK,
    )

    # Learning module, application use cases
    quiz_use_case = providers.Factory(
        QuizUseCase,
        pool_loader=study_pool_loader,
        vocab_item_repository=vocab_item_repository,
        mastery_repository=mastery_repository,
        session_store=quiz_session_store,
        mastery_tracker=mastery_tracker,
        default_required_streak=settings.DEFAULT_REQUIRED_STREAK,
    )
    review_use_case = providers.Factory(
        ReviewUseCase,
        pool_loader=study_pool_loader,
        mastery_repository=mastery_repository,
        sentence_lang=settings.SPEECH_LANGUAGE,
        translation_lang=settings.TRANSLATION_LANGUAGE,
    )
    mastery_use_case = providers.Factory(
        MasteryUseCase,
        vocab_item_repository=vocab_item_repository,
        mastery_repository=mastery_repository,
    )

    # Identity use cases
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )


# Initialize container
container = Container()
