"""Use case for study session operations."""

from datetime import datetime

import structlog

from flashcards.application.learning.protocols.study_session_repository import (
    StudySessionRepositoryProtocol,
)
from flashcards.application.learning.services.stack_cache import StackCache
from flashcards.application.learning.use_cases.dtos import StudySessionInfo
from flashcards.domain.common.value_objects import StackId, StudySessionId
from flashcards.domain.learning.entities import StudySession

logger = structlog.get_logger(__name__)


class StudySessionUseCase:
    """Use case for recording and listing study sessions."""

    def __init__(
        self,
        study_session_repository: StudySessionRepositoryProtocol,
        stack_cache: StackCache,
    ) -> None:
        """Initialize use case with repository protocol and the shared cache."""
        self.study_session_repository = study_session_repository
        self.stack_cache = stack_cache

    async def create_study_session(self, stack_id: int, study_time: datetime, score: int) -> int:
        """
        Record a study session.

        Args:
            stack_id: ID of the studied stack
            study_time: When the session took place
            score: Number of correct answers

        Returns:
            ID of the new study session

        Raises:
            ValidationError: If score is negative
            StackNotFoundError: If the stack does not exist
        """
        study_session = StudySession.create(StackId(stack_id), study_time, score)

        study_session_id = await self.study_session_repository.add(study_session)
        await self.stack_cache.rebuild()

        logger.info(
            "created_study_session",
            study_session_id=study_session_id.value,
            stack_id=stack_id,
            score=score,
        )
        return study_session_id.value

    async def update_study_session(
        self, study_session_id: int, study_time: datetime, score: int
    ) -> bool:
        """Correct the time and score of a recorded session. Returns False if not found."""
        score = StudySession.validate_score(score)

        updated = await self.study_session_repository.update(
            StudySessionId(study_session_id), study_time, score
        )
        await self.stack_cache.rebuild()

        logger.info("updated_study_session", study_session_id=study_session_id, found=updated)
        return updated

    async def delete_study_session(self, study_session_id: int) -> bool:
        """Delete a recorded session. Returns False if not found."""
        deleted = await self.study_session_repository.delete(StudySessionId(study_session_id))
        await self.stack_cache.rebuild()

        logger.info("deleted_study_session", study_session_id=study_session_id, found=deleted)
        return deleted

    async def list_study_sessions(self) -> list[StudySessionInfo]:
        """List every study session, grouped by stack in cache order."""
        await self.stack_cache.ensure_ready()
        return [
            StudySessionInfo.from_entity(study_session, stack)
            for stack in self.stack_cache.list_all()
            for study_session in stack.study_sessions
        ]

    async def get_study_session(self, study_session_id: int) -> StudySessionInfo | None:
        """Get one study session, or None if it does not exist."""
        await self.stack_cache.ensure_ready()
        if study_session_id < 0:
            return None

        session_id = StudySessionId(study_session_id)
        for stack in self.stack_cache.list_all():
            study_session = stack.find_study_session(session_id)
            if study_session is not None:
                return StudySessionInfo.from_entity(study_session, stack)
        return None
