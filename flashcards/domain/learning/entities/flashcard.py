"""
Flashcard entity.
"""

from dataclasses import dataclass

from flashcards.domain.common.entity import Entity
from flashcards.domain.common.exceptions import ValidationError
from flashcards.domain.common.value_objects import FlashcardId, StackId


@dataclass(frozen=True, eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Front/back question-answer pair.

    Business Rules:
    - Front and back cannot be blank
    - Belongs to exactly one stack
    """

    id: FlashcardId
    stack_id: StackId
    front: str
    back: str

    @staticmethod
    def normalize_content(front: str, back: str) -> tuple[str, str]:
        """
        Strip and validate card text.

        Raises:
            ValidationError: If front or back is blank
        """
        if not front or not front.strip():
            raise ValidationError("Front cannot be empty", field="front")
        if not back or not back.strip():
            raise ValidationError("Back cannot be empty", field="back")
        return front.strip(), back.strip()

    @classmethod
    def create(cls, stack_id: StackId, front: str, back: str) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        front, back = cls.normalize_content(front, back)
        return cls(id=FlashcardId.generate(), stack_id=stack_id, front=front, back=back)

    @classmethod
    def create_with_id(
        cls, id: FlashcardId, stack_id: StackId, front: str, back: str
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(id=id, stack_id=stack_id, front=front, back=back)
