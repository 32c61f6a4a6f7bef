"""Protocol for Stack repository in learning context."""

from typing import Protocol

from flashcards.domain.common.value_objects import StackId
from flashcards.domain.learning.entities import Stack


class StackRepositoryProtocol(Protocol):
    """Protocol for Stack write operations."""

    async def add(self, stack: Stack) -> StackId:
        """
        Insert a stack row, then one row per flashcard of the stack.

        The inserts are committed one by one, so a failure part way
        leaves the stack with the flashcards inserted so far.

        Args:
            stack: New stack with unsaved flashcards

        Returns:
            Store-assigned stack ID
        """
        ...

    async def rename(self, stack_id: StackId, name: str) -> bool:
        """
        Update a stack's name.

        Returns:
            True if a row was updated, False if not found
        """
        ...

    async def delete(self, stack_id: StackId) -> bool:
        """
        Delete a stack. Child rows are removed by the store's cascade.

        Returns:
            True if deleted, False if not found
        """
        ...
