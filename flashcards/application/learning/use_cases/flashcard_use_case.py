"""Use case for flashcard operations."""

import structlog

from flashcards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashcards.application.learning.services.stack_cache import StackCache
from flashcards.application.learning.use_cases.dtos import FlashcardInfo
from flashcards.domain.common.value_objects import FlashcardId, StackId
from flashcards.domain.learning.entities import Flashcard
from flashcards.exceptions import StackNotFoundError

logger = structlog.get_logger(__name__)


class FlashcardUseCase:
    """Use case for flashcard CRUD operations."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        stack_cache: StackCache,
    ) -> None:
        """Initialize use case with repository protocol and the shared cache."""
        self.flashcard_repository = flashcard_repository
        self.stack_cache = stack_cache

    async def create_flashcard(self, stack_id: int, front: str, back: str) -> int:
        """
        Add a flashcard to a stack.

        Args:
            stack_id: ID of the owning stack
            front: Question side
            back: Answer side

        Returns:
            ID of the new flashcard

        Raises:
            ValidationError: If front or back is blank
            StackNotFoundError: If the stack does not exist
        """
        flashcard = Flashcard.create(StackId(stack_id), front, back)

        flashcard_id = await self.flashcard_repository.add(flashcard)
        await self.stack_cache.rebuild()

        logger.info("created_flashcard", flashcard_id=flashcard_id.value, stack_id=stack_id)
        return flashcard_id.value

    async def update_flashcard(self, flashcard_id: int, front: str, back: str) -> bool:
        """
        Replace a flashcard's front and back.

        Returns:
            True if the flashcard existed

        Raises:
            ValidationError: If front or back is blank
        """
        front, back = Flashcard.normalize_content(front, back)

        updated = await self.flashcard_repository.update_content(
            FlashcardId(flashcard_id), front, back
        )
        await self.stack_cache.rebuild()

        logger.info("updated_flashcard", flashcard_id=flashcard_id, found=updated)
        return updated

    async def delete_flashcard(self, flashcard_id: int) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if the flashcard existed
        """
        deleted = await self.flashcard_repository.delete(FlashcardId(flashcard_id))
        await self.stack_cache.rebuild()

        logger.info("deleted_flashcard", flashcard_id=flashcard_id, found=deleted)
        return deleted

    async def get_flashcard(self, stack_id: int, flashcard_id: int) -> FlashcardInfo | None:
        """
        Get a flashcard of a stack.

        Returns:
            The flashcard, or None if the stack does not exist or the
            flashcard does not belong to it
        """
        await self.stack_cache.ensure_ready()
        stack = self.stack_cache.find(stack_id)
        if stack is None or flashcard_id < 0:
            return None

        flashcard = stack.find_flashcard(FlashcardId(flashcard_id))
        return FlashcardInfo.from_entity(flashcard) if flashcard else None

    async def list_stack_flashcards(self, stack_id: int) -> list[FlashcardInfo]:
        """
        List the flashcards of a stack.

        Raises:
            StackNotFoundError: If the stack does not exist
        """
        await self.stack_cache.ensure_ready()
        stack = self.stack_cache.find(stack_id)
        if stack is None:
            raise StackNotFoundError(stack_id)
        return [FlashcardInfo.from_entity(f) for f in stack.flashcards]
