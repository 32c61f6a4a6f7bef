"""Mappers for new domain entities → ORM models."""

from flashcards.domain.learning.entities import Flashcard, Stack, StudySession
from flashcards.models import Flashcard as FlashcardORM
from flashcards.models import Stack as StackORM
from flashcards.models import StudySession as StudySessionORM


class StackMapper:
    """Mapper for Stack domain → ORM conversion. Flashcards are mapped separately."""

    def to_orm(self, domain_entity: Stack) -> StackORM:
        """Convert domain entity to ORM model."""
        return StackORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            name=domain_entity.name,
        )


class FlashcardMapper:
    """Mapper for Flashcard domain → ORM conversion."""

    def to_orm(self, domain_entity: Flashcard, stack_id: int | None = None) -> FlashcardORM:
        """
        Convert domain entity to ORM model.

        Args:
            domain_entity: The flashcard
            stack_id: Overrides the entity's stack id, for cards of a stack
                that was just inserted
        """
        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            stack_id=stack_id if stack_id is not None else domain_entity.stack_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
        )


class StudySessionMapper:
    """Mapper for StudySession domain → ORM conversion."""

    def to_orm(self, domain_entity: StudySession) -> StudySessionORM:
        """Convert domain entity to ORM model."""
        return StudySessionORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            stack_id=domain_entity.stack_id.value,
            study_time=domain_entity.study_time,
            score=domain_entity.score,
        )
