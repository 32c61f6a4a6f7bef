"""
Stack aggregate.
"""

from dataclasses import dataclass

from flashcards.domain.common.entity import Entity
from flashcards.domain.common.exceptions import ValidationError
from flashcards.domain.common.value_objects import FlashcardId, StackId, StudySessionId
from flashcards.domain.learning.entities.flashcard import Flashcard
from flashcards.domain.learning.entities.study_session import StudySession


@dataclass(frozen=True, eq=False)
class Stack(Entity[StackId]):
    """
    Named collection of flashcards and the study sessions run against it.

    Business Rules:
    - Name cannot be blank
    - Flashcard ids are unique within a stack
    - Study session ids are unique within a stack
    """

    id: StackId
    name: str
    flashcards: tuple[Flashcard, ...] = ()
    study_sessions: tuple[StudySession, ...] = ()

    @staticmethod
    def normalize_name(name: str) -> str:
        """
        Strip and validate a stack name.

        Raises:
            ValidationError: If name is blank
        """
        if not name or not name.strip():
            raise ValidationError("Stack name cannot be empty", field="name")
        return name.strip()

    def find_flashcard(self, flashcard_id: FlashcardId) -> Flashcard | None:
        """Return the flashcard with this id, if it belongs to the stack."""
        return next((f for f in self.flashcards if f.id == flashcard_id), None)

    def find_study_session(self, study_session_id: StudySessionId) -> StudySession | None:
        """Return the study session with this id, if it belongs to the stack."""
        return next((s for s in self.study_sessions if s.id == study_session_id), None)

    @classmethod
    def create(cls, name: str, flashcards: tuple[Flashcard, ...] = ()) -> "Stack":
        """Create a new stack with unsaved flashcards (IDs will be 0 until persisted)."""
        return cls(id=StackId.generate(), name=cls.normalize_name(name), flashcards=flashcards)

    @classmethod
    def create_with_id(
        cls,
        id: StackId,
        name: str,
        flashcards: tuple[Flashcard, ...] = (),
        study_sessions: tuple[StudySession, ...] = (),
    ) -> "Stack":
        """Reconstitute a stack from persistence."""
        return cls(id=id, name=name, flashcards=flashcards, study_sessions=study_sessions)
