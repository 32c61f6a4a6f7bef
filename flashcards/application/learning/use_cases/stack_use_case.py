"""Use case for stack operations."""

from collections.abc import Sequence

import structlog

from flashcards.application.learning.protocols.stack_repository import StackRepositoryProtocol
from flashcards.application.learning.services.stack_cache import StackCache
from flashcards.application.learning.use_cases.dtos import FlashcardContent, PlayStack, StackInfo
from flashcards.domain.common.value_objects import StackId
from flashcards.domain.learning.entities import Flashcard, Stack
from flashcards.exceptions import StackNotFoundError

logger = structlog.get_logger(__name__)


class StackUseCase:
    """Use case for stack CRUD operations."""

    def __init__(
        self,
        stack_repository: StackRepositoryProtocol,
        stack_cache: StackCache,
    ) -> None:
        """Initialize use case with repository protocol and the shared cache."""
        self.stack_repository = stack_repository
        self.stack_cache = stack_cache

    async def create_stack(
        self, name: str, flashcards: Sequence[FlashcardContent] = ()
    ) -> int:
        """
        Create a stack together with its initial flashcards.

        Args:
            name: Stack name
            flashcards: Initial flashcard contents, inserted in order

        Returns:
            ID of the new stack

        Raises:
            ValidationError: If the name or any flashcard text is blank
        """
        stack = Stack.create(
            name,
            tuple(Flashcard.create(StackId.generate(), c.front, c.back) for c in flashcards),
        )

        stack_id = await self.stack_repository.add(stack)
        await self.stack_cache.rebuild()

        logger.info("created_stack", stack_id=stack_id.value, flashcards=len(stack.flashcards))
        return stack_id.value

    async def update_stack(self, stack_id: int, name: str) -> bool:
        """
        Rename a stack.

        Returns:
            True if the stack existed

        Raises:
            ValidationError: If the name is blank
        """
        name = Stack.normalize_name(name)

        updated = await self.stack_repository.rename(StackId(stack_id), name)
        await self.stack_cache.rebuild()

        logger.info("updated_stack", stack_id=stack_id, found=updated)
        return updated

    async def delete_stack(self, stack_id: int) -> bool:
        """
        Delete a stack with its flashcards and study sessions.

        Returns:
            True if the stack existed
        """
        deleted = await self.stack_repository.delete(StackId(stack_id))
        await self.stack_cache.rebuild()

        logger.info("deleted_stack", stack_id=stack_id, found=deleted)
        return deleted

    async def list_stacks(self) -> list[StackInfo]:
        """List all stacks in cache order."""
        await self.stack_cache.ensure_ready()
        return [StackInfo.from_entity(stack) for stack in self.stack_cache.list_all()]

    async def get_stack_by_id(self, stack_id: int) -> StackInfo | None:
        """Get a stack, or None if it does not exist."""
        await self.stack_cache.ensure_ready()
        stack = self.stack_cache.find(stack_id)
        return StackInfo.from_entity(stack) if stack else None

    async def get_playable_stack(self, stack_id: int) -> PlayStack:
        """
        Get a stack with its flashcards, ready to study.

        Callers are expected to have checked existence first,
        e.g. with get_stack_by_id().

        Raises:
            StackNotFoundError: If the stack does not exist
        """
        await self.stack_cache.ensure_ready()
        stack = self.stack_cache.find(stack_id)
        if stack is None:
            raise StackNotFoundError(stack_id)
        return PlayStack.from_entity(stack)
