"""Repository for Flashcard writes."""

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flashcards.domain.common.value_objects import FlashcardId
from flashcards.domain.learning.entities import Flashcard
from flashcards.exceptions import StackNotFoundError
from flashcards.infrastructure.common.storage_errors import storage_errors
from flashcards.infrastructure.learning.mappers.entity_mappers import FlashcardMapper
from flashcards.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard writes."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self.mapper = FlashcardMapper()

    async def add(self, flashcard: Flashcard) -> FlashcardId:
        """
        Insert a flashcard.

        Args:
            flashcard: New flashcard entity (ID 0)

        Returns:
            Store-assigned flashcard ID

        Raises:
            StackNotFoundError: If the owning stack does not exist
        """
        async with storage_errors("create_flashcard"), self.session_factory() as session:
            orm_model = self.mapper.to_orm(flashcard)
            session.add(orm_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Only the StackId foreign key can fail on insert
                raise StackNotFoundError(flashcard.stack_id.value) from e
            return FlashcardId(orm_model.id)

    async def update_content(self, flashcard_id: FlashcardId, front: str, back: str) -> bool:
        """
        Update a flashcard's front and back.

        Returns:
            True if a row was updated, False if not found
        """
        stmt = (
            update(FlashcardORM)
            .where(FlashcardORM.id == flashcard_id.value)
            .values(front=front, back=back)
        )
        async with storage_errors("update_flashcard"), self.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0

    async def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        stmt = delete(FlashcardORM).where(FlashcardORM.id == flashcard_id.value)
        async with storage_errors("delete_flashcard"), self.session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()
        return result.rowcount > 0
