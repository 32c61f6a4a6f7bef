"""Repository for StudySession writes."""

from datetime import datetime

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flashcards.domain.common.value_objects import StudySessionId
from flashcards.domain.learning.entities import StudySession
from flashcards.exceptions import StackNotFoundError
from flashcards.infrastructure.common.storage_errors import storage_errors
from flashcards.infrastructure.learning.mappers.entity_mappers import StudySessionMapper
from flashcards.models import StudySession as StudySessionORM


class StudySessionRepository:
    """Repository for StudySession writes."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.mapper = StudySessionMapper()

    async def add(self, study_session: StudySession) -> StudySessionId:
        """
        Insert a study session and return its store-assigned ID.

        Raises:
            StackNotFoundError: If the owning stack does not exist
        """
        async with storage_errors("create_study_session"), self.session_factory() as session:
            orm_model = self.mapper.to_orm(study_session)
            session.add(orm_model)
            try:
                await session.commit()
            except IntegrityError as e:
                raise StackNotFoundError(study_session.stack_id.value) from e
            return StudySessionId(orm_model.id)

    async def update(
        self, study_session_id: StudySessionId, study_time: datetime, score: int
    ) -> bool:
        """Update time and score. Returns False if not found."""
        stmt = (
            update(StudySessionORM)
            .where(StudySessionORM.id == study_session_id.value)
            .values(study_time=study_time, score=score)
        )
        async with storage_errors("update_study_session"), self.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0

    async def delete(self, study_session_id: StudySessionId) -> bool:
        """Delete a study session. Returns False if not found."""
        stmt = delete(StudySessionORM).where(StudySessionORM.id == study_session_id.value)
        async with storage_errors("delete_study_session"), self.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0
