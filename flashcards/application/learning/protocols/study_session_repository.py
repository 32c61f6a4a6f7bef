"""Protocol for StudySession repository in learning context."""

from datetime import datetime
from typing import Protocol

from flashcards.domain.common.value_objects import StudySessionId
from flashcards.domain.learning.entities import StudySession


class StudySessionRepositoryProtocol(Protocol):
    """Protocol for StudySession write operations."""

    async def add(self, study_session: StudySession) -> StudySessionId:
        """Insert a study session and return its store-assigned ID."""
        ...

    async def update(
        self, study_session_id: StudySessionId, study_time: datetime, score: int
    ) -> bool:
        """Update time and score. Returns False if not found."""
        ...

    async def delete(self, study_session_id: StudySessionId) -> bool:
        """Delete a study session. Returns False if not found."""
        ...
