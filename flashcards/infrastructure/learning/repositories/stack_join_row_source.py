"""Row source executing the stack/flashcard/study-session left join."""

from collections.abc import AsyncGenerator

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flashcards.domain.learning.value_objects import JoinRow
from flashcards.infrastructure.common.storage_errors import storage_errors
from flashcards.infrastructure.learning.mappers.join_row_mapper import JoinRowMapper
from flashcards.models import Flashcard as FlashcardORM
from flashcards.models import Stack as StackORM
from flashcards.models import StudySession as StudySessionORM


class StackJoinRowSource:
    """Streams one row per stack x flashcard x study session combination."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.mapper = JoinRowMapper()

    def statement(self) -> Select:
        """
        The three-way left outer join on stack identity.

        Stacks without flashcards or study sessions still produce one row,
        with NULLs on the missing side.
        """
        return (
            select(*self.mapper.columns)
            .select_from(StackORM)
            .outerjoin(FlashcardORM, FlashcardORM.stack_id == StackORM.id)
            .outerjoin(StudySessionORM, StudySessionORM.stack_id == StackORM.id)
            .order_by(StackORM.id, FlashcardORM.id, StudySessionORM.id)
        )

    async def stream(self) -> AsyncGenerator[JoinRow, None]:
        """
        Stream every join row.

        Raises:
            StorageUnavailableError: If the store cannot be reached
        """
        async with storage_errors("stack_join"), self.session_factory() as session:
            result = await session.stream(self.statement())
            async for row in result:
                yield self.mapper.to_join_row(row)
