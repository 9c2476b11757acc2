from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.application.learning.use_cases.cards.add_card_use_case import AddCardUseCase
from flashdeck.application.learning.use_cases.cards.remove_card_use_case import (
    RemoveCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.review_card_use_case import (
    ReviewCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.update_card_use_case import (
    UpdateCardUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.create_flashcard_set_use_case import (
    CreateFlashcardSetUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.delete_flashcard_set_use_case import (
    DeleteFlashcardSetUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.get_flashcard_set_use_case import (
    GetFlashcardSetUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.list_flashcard_sets_use_case import (
    ListFlashcardSetsUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.update_flashcard_set_use_case import (
    UpdateFlashcardSetUseCase,
)
from flashdeck.config import get_settings
from flashdeck.infrastructure.learning.repositories.flashcard_set_repository import (
    FlashcardSetRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories
    flashcard_set_repository = providers.Factory(
        FlashcardSetRepository,
        db=db,
        default_timeout=settings.provided.STORE_TIMEOUT_SECONDS,
    )

    # Application services
    set_access_gate = providers.Factory(
        SetAccessGate,
        flashcard_set_repository=flashcard_set_repository,
    )

    # Learning module, flashcard set use cases
    create_flashcard_set_use_case = providers.Factory(
        CreateFlashcardSetUseCase,
        flashcard_set_repository=flashcard_set_repository,
    )
    get_flashcard_set_use_case = providers.Factory(
        GetFlashcardSetUseCase,
        access_gate=set_access_gate,
    )
    list_flashcard_sets_use_case = providers.Factory(
        ListFlashcardSetsUseCase,
        flashcard_set_repository=flashcard_set_repository,
    )
    update_flashcard_set_use_case = providers.Factory(
        UpdateFlashcardSetUseCase,
        flashcard_set_repository=flashcard_set_repository,
        access_gate=set_access_gate,
    )
    delete_flashcard_set_use_case = providers.Factory(
        DeleteFlashcardSetUseCase,
        flashcard_set_repository=flashcard_set_repository,
        access_gate=set_access_gate,
    )

    # Learning module, card use cases
    add_card_use_case = providers.Factory(
        AddCardUseCase,
        flashcard_set_repository=flashcard_set_repository,
        access_gate=set_access_gate,
    )
    update_card_use_case = providers.Factory(
        UpdateCardUseCase,
        flashcard_set_repository=flashcard_set_repository,
        access_gate=set_access_gate,
    )
    remove_card_use_case = providers.Factory(
        RemoveCardUseCase,
        flashcard_set_repository=flashcard_set_repository,
        access_gate=set_access_gate,
    )
    review_card_use_case = providers.Factory(
        ReviewCardUseCase,
        flashcard_set_repository=flashcard_set_repository,
        access_gate=set_access_gate,
    )


# Initialize container
container = Container()
