"""Repository for Stack writes."""

import structlog
from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flashcards.domain.common.value_objects import StackId
from flashcards.domain.learning.entities import Stack
from flashcards.infrastructure.common.storage_errors import storage_errors
from flashcards.infrastructure.learning.mappers.entity_mappers import FlashcardMapper, StackMapper
from flashcards.models import Stack as StackORM

logger = structlog.get_logger(__name__)


class StackRepository:
    """Repository for Stack writes."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.mapper = StackMapper()
        self.flashcard_mapper = FlashcardMapper()

    async def add(self, stack: Stack) -> StackId:
        """
        Insert a stack, then each of its flashcards.

        Every insert is committed on its own; there is no enclosing
        transaction, so a failure part way keeps what was inserted.

        Args:
            stack: New stack with unsaved flashcards

        Returns:
            Store-assigned stack ID
        """
        async with storage_errors("create_stack"), self.session_factory() as session:
            orm_stack = self.mapper.to_orm(stack)
            session.add(orm_stack)
            await session.commit()
            stack_id = StackId(orm_stack.id)

            for flashcard in stack.flashcards:
                session.add(self.flashcard_mapper.to_orm(flashcard, stack_id=stack_id.value))
                await session.commit()

        logger.debug("inserted_stack", stack_id=stack_id.value, flashcards=len(stack.flashcards))
        return stack_id

    async def rename(self, stack_id: StackId, name: str) -> bool:
        """
        Update a stack's name.

        Returns:
            True if a row was updated, False if not found
        """
        stmt = update(StackORM).where(StackORM.id == stack_id.value).values(name=name)
        async with storage_errors("update_stack"), self.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0

    async def delete(self, stack_id: StackId) -> bool:
        """
        Delete a stack. Flashcards and study sessions go with it via ON DELETE CASCADE.

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(StackORM).where(StackORM.id == stack_id.value)
        async with storage_errors("delete_stack"), self.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0
