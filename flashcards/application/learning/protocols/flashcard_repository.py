"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashcards.domain.common.value_objects import FlashcardId
from flashcards.domain.learning.entities import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard write operations."""

    async def add(self, flashcard: Flashcard) -> FlashcardId:
        """
        Insert a flashcard.

        Args:
            flashcard: New flashcard entity (ID 0)

        Returns:
            Store-assigned flashcard ID
        """
        ...

    async def update_content(self, flashcard_id: FlashcardId, front: str, back: str) -> bool:
        """
        Update a flashcard's front and back.

        Returns:
            True if a row was updated, False if not found
        """
        ...

    async def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...
