"""
StudySession entity.
"""

from dataclasses import dataclass
from datetime import datetime

from flashcards.domain.common.entity import Entity
from flashcards.domain.common.exceptions import ValidationError
from flashcards.domain.common.value_objects import StackId, StudySessionId


@dataclass(frozen=True, eq=False)
class StudySession(Entity[StudySessionId]):
    """
    Recorded study attempt against a stack.

    Business Rules:
    - Score cannot be negative
    """

    id: StudySessionId
    stack_id: StackId
    study_time: datetime
    score: int

    @staticmethod
    def validate_score(score: int) -> int:
        """
        Validate a session score.

        Raises:
            ValidationError: If score is negative
        """
        if score < 0:
            raise ValidationError("Score cannot be negative", field="score", value=score)
        return score

    @classmethod
    def create(cls, stack_id: StackId, study_time: datetime, score: int) -> "StudySession":
        """Create a new study session (ID will be 0 until persisted)."""
        return cls(
            id=StudySessionId.generate(),
            stack_id=stack_id,
            study_time=study_time,
            score=cls.validate_score(score),
        )

    @classmethod
    def create_with_id(
        cls,
        id: StudySessionId,
        stack_id: StackId,
        study_time: datetime,
        score: int,
    ) -> "StudySession":
        """Reconstitute a study session from persistence."""
        return cls(id=id, stack_id=stack_id, study_time=study_time, score=score)
