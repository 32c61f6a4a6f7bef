"""Tests for stack use cases against an in-memory database."""

from datetime import datetime

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from flashcards import models
from flashcards.application.learning.services.stack_cache import StackCache
from flashcards.application.learning.use_cases import StackUseCase, StudySessionUseCase
from flashcards.application.learning.use_cases.dtos import FlashcardContent
from flashcards.domain.common.exceptions import ValidationError
from flashcards.exceptions import StackNotFoundError
from tests.conftest import create_test_stack


async def _count(session_factory: async_sessionmaker[AsyncSession], model: type) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


class TestCreateStack:
    """Test suite for creating stacks."""

    @pytest.mark.asyncio
    async def test_create_stack_with_flashcards(self, stack_use_case: StackUseCase) -> None:
        stack_id = await stack_use_case.create_stack(
            "Algebra",
            [FlashcardContent("2+2", "4"), FlashcardContent("3+3", "6")],
        )

        play_stack = await stack_use_case.get_playable_stack(stack_id)
        assert play_stack.name == "Algebra"
        assert [(f.front, f.back) for f in play_stack.flashcards] == [("2+2", "4"), ("3+3", "6")]

    @pytest.mark.asyncio
    async def test_create_stack_without_flashcards(self, stack_use_case: StackUseCase) -> None:
        stack_id = await stack_use_case.create_stack("Empty")

        play_stack = await stack_use_case.get_playable_stack(stack_id)
        assert play_stack.flashcards == []

    @pytest.mark.asyncio
    async def test_create_stack_rebuilds_cache(
        self, stack_use_case: StackUseCase, stack_cache: StackCache
    ) -> None:
        await stack_use_case.create_stack("Algebra")

        assert stack_cache.initialized is True
        assert stack_cache.generation == 1

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected_before_storage(
        self,
        stack_use_case: StackUseCase,
        stack_cache: StackCache,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        with pytest.raises(ValidationError):
            await stack_use_case.create_stack("   ")

        assert await _count(session_factory, models.Stack) == 0
        assert stack_cache.generation == 0

    @pytest.mark.asyncio
    async def test_blank_flashcard_is_rejected_before_storage(
        self,
        stack_use_case: StackUseCase,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        with pytest.raises(ValidationError):
            await stack_use_case.create_stack("Algebra", [FlashcardContent("2+2", "")])

        assert await _count(session_factory, models.Stack) == 0

    @pytest.mark.asyncio
    async def test_failed_flashcard_insert_keeps_earlier_rows(
        self,
        engine: AsyncEngine,
        stack_use_case: StackUseCase,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        async with engine.begin() as conn:
            await conn.execute(
                text(
                    "CREATE TRIGGER reject_card BEFORE INSERT ON Flashcards "
                    "WHEN NEW.Front = 'boom' BEGIN SELECT RAISE(ABORT, 'rejected'); END"
                )
            )
        contents = [
            FlashcardContent("1+1", "2"),
            FlashcardContent("2+2", "4"),
            FlashcardContent("boom", "x"),
            FlashcardContent("3+3", "6"),
        ]

        with pytest.raises(IntegrityError):
            await stack_use_case.create_stack("Algebra", contents)

        assert await _count(session_factory, models.Stack) == 1
        assert await _count(session_factory, models.Flashcard) == 2

        # The partial stack shows up once the next write rebuilds the cache
        await stack_use_case.create_stack("Geometry")
        algebra = (await stack_use_case.list_stacks())[0]
        play_stack = await stack_use_case.get_playable_stack(algebra.id)
        assert [f.front for f in play_stack.flashcards] == ["1+1", "2+2"]


class TestReadStacks:
    """Test suite for reading stacks through the cache."""

    @pytest.mark.asyncio
    async def test_first_read_populates_cache_once(
        self,
        stack_use_case: StackUseCase,
        stack_cache: StackCache,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        await create_test_stack(session_factory, "Algebra")
        await create_test_stack(session_factory, "Geometry")

        stacks = await stack_use_case.list_stacks()
        await stack_use_case.list_stacks()

        assert [s.name for s in stacks] == ["Algebra", "Geometry"]
        assert stack_cache.generation == 1

    @pytest.mark.asyncio
    async def test_list_stacks_empty_store(self, stack_use_case: StackUseCase) -> None:
        assert await stack_use_case.list_stacks() == []

    @pytest.mark.asyncio
    async def test_direct_inserts_are_invisible_until_next_write(
        self,
        stack_use_case: StackUseCase,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        await stack_use_case.create_stack("Algebra")
        await create_test_stack(session_factory, "Geometry")

        assert [s.name for s in await stack_use_case.list_stacks()] == ["Algebra"]

        await stack_use_case.create_stack("Physics")
        assert [s.name for s in await stack_use_case.list_stacks()] == [
            "Algebra",
            "Geometry",
            "Physics",
        ]

    @pytest.mark.asyncio
    async def test_get_stack_by_id(
        self,
        stack_use_case: StackUseCase,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        stack_id = await create_test_stack(session_factory, "Algebra")

        stack = await stack_use_case.get_stack_by_id(stack_id)

        assert stack is not None
        assert (stack.id, stack.name) == (stack_id, "Algebra")
        assert await stack_use_case.get_stack_by_id(stack_id + 100) is None

    @pytest.mark.asyncio
    async def test_playable_stack_is_not_multiplied_by_sessions(
        self,
        stack_use_case: StackUseCase,
        study_session_use_case: StudySessionUseCase,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        stack_id = await create_test_stack(
            session_factory,
            "Biology",
            flashcards=[("cell", "unit of life"), ("DNA", "genome"), ("ATP", "energy")],
            study_sessions=[(datetime(2024, 4, 1, 10), 2), (datetime(2024, 4, 2, 10), 3)],
        )

        play_stack = await stack_use_case.get_playable_stack(stack_id)
        sessions = await study_session_use_case.list_study_sessions()

        assert [f.front for f in play_stack.flashcards] == ["cell", "DNA", "ATP"]
        assert [s.score for s in sessions] == [2, 3]

    @pytest.mark.asyncio
    async def test_get_playable_stack_missing_raises(self, stack_use_case: StackUseCase) -> None:
        with pytest.raises(StackNotFoundError) as exc_info:
            await stack_use_case.get_playable_stack(404)

        assert exc_info.value.status_code == 404
        assert exc_info.value.stack_id == 404

    @pytest.mark.asyncio
    async def test_negative_id_is_absent(
        self,
        stack_use_case: StackUseCase,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        await create_test_stack(session_factory, "Algebra")

        assert await stack_use_case.get_stack_by_id(-1) is None
        with pytest.raises(StackNotFoundError):
            await stack_use_case.get_playable_stack(-1)


class TestUpdateStack:
    """Test suite for renaming stacks."""

    @pytest.mark.asyncio
    async def test_rename_is_visible_to_reads(self, stack_use_case: StackUseCase) -> None:
        stack_id = await stack_use_case.create_stack("Algebra")

        assert await stack_use_case.update_stack(stack_id, " Linear Algebra ") is True

        stack = await stack_use_case.get_stack_by_id(stack_id)
        assert stack is not None
        assert stack.name == "Linear Algebra"

    @pytest.mark.asyncio
    async def test_rename_missing_stack(self, stack_use_case: StackUseCase) -> None:
        assert await stack_use_case.update_stack(404, "Nothing") is False

    @pytest.mark.asyncio
    async def test_rename_to_blank_is_rejected(self, stack_use_case: StackUseCase) -> None:
        stack_id = await stack_use_case.create_stack("Algebra")

        with pytest.raises(ValidationError):
            await stack_use_case.update_stack(stack_id, "")


class TestDeleteStack:
    """Test suite for deleting stacks."""

    @pytest.mark.asyncio
    async def test_delete_removes_stack_and_children(
        self,
        stack_use_case: StackUseCase,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        stack_id = await create_test_stack(
            session_factory,
            "Algebra",
            flashcards=[("2+2", "4")],
            study_sessions=[(datetime(2024, 4, 1, 10), 1)],
        )
        other_id = await create_test_stack(session_factory, "Geometry", flashcards=[("pi", "3.14")])

        assert await stack_use_case.delete_stack(stack_id) is True

        assert await stack_use_case.get_stack_by_id(stack_id) is None
        assert [s.id for s in await stack_use_case.list_stacks()] == [other_id]
        assert await _count(session_factory, models.Flashcard) == 1
        assert await _count(session_factory, models.StudySession) == 0

    @pytest.mark.asyncio
    async def test_delete_missing_stack(
        self, stack_use_case: StackUseCase, stack_cache: StackCache
    ) -> None:
        assert await stack_use_case.delete_stack(404) is False
        assert stack_cache.initialized is True
