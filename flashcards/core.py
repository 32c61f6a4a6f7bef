import structlog
from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import async_sessionmaker

from flashcards.application.learning.services.stack_cache import StackCache
from flashcards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from flashcards.application.learning.use_cases.stack_use_case import StackUseCase
from flashcards.application.learning.use_cases.study_session_use_case import (
    StudySessionUseCase,
)
from flashcards.config import Settings, configure_logging, get_settings
from flashcards.database import dispose_engine, get_session_factory, initialize_database
from flashcards.domain.learning.services.stack_graph_builder import StackGraphBuilder
from flashcards.infrastructure.learning.repositories import (
    FlashcardRepository,
    StackJoinRowSource,
    StackRepository,
    StudySessionRepository,
)

logger = structlog.get_logger(__name__)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Provided at startup by init_app(), or overridden in tests
    session_factory = providers.Dependency(instance_of=async_sessionmaker)

    # Repositories
    stack_repository = providers.Factory(StackRepository, session_factory=session_factory)
    flashcard_repository = providers.Factory(FlashcardRepository, session_factory=session_factory)
    study_session_repository = providers.Factory(
        StudySessionRepository, session_factory=session_factory
    )
    stack_row_source = providers.Factory(StackJoinRowSource, session_factory=session_factory)

    # Domain services (pure domain logic, no db)
    stack_graph_builder = providers.Factory(StackGraphBuilder)

    # One cache per process, shared by every use case
    stack_cache = providers.Singleton(
        StackCache,
        row_source=stack_row_source,
        graph_builder=stack_graph_builder,
    )

    # Learning module use cases
    stack_use_case = providers.Factory(
        StackUseCase,
        stack_repository=stack_repository,
        stack_cache=stack_cache,
    )

    flashcard_use_case = providers.Factory(
        FlashcardUseCase,
        flashcard_repository=flashcard_repository,
        stack_cache=stack_cache,
    )

    study_session_use_case = providers.Factory(
        StudySessionUseCase,
        study_session_repository=study_session_repository,
        stack_cache=stack_cache,
    )


def init_app(settings: Settings | None = None) -> Container:
    """Configure logging and the database, and bind them to the container."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    container.session_factory.override(get_session_factory())
    logger.info("app_initialized", environment=settings.ENVIRONMENT, version=settings.VERSION)
    return container


async def shutdown_app() -> None:
    """Drop the cached graph and release database connections."""
    container.stack_cache().clear()
    container.stack_cache.reset()
    container.session_factory.reset_override()
    await dispose_engine()
    logger.info("app_shutdown")


# Initialize container
container = Container()
