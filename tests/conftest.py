"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, AsyncIterator, Iterable, Iterator
from datetime import datetime

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from flashcards import models
from flashcards.application.learning.services.stack_cache import StackCache
from flashcards.application.learning.use_cases import (
    FlashcardUseCase,
    StackUseCase,
    StudySessionUseCase,
)
from flashcards.core import Container, container
from flashcards.database import build_engine, build_session_factory, create_tables
from flashcards.domain.learning.value_objects import JoinRow

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeRowSource:
    """Row source serving canned join rows, counting how often it is queried."""

    def __init__(self, rows: Iterable[JoinRow] = ()) -> None:
        self.rows = list(rows)
        self.calls = 0
        self.error: Exception | None = None

    async def stream(self) -> AsyncGenerator[JoinRow, None]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        for row in self.rows:
            yield row


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory database with all tables for each test."""
    test_engine = build_engine(TEST_DATABASE_URL)
    await create_tables(test_engine)
    try:
        yield test_engine
    finally:
        await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture
def app_container(session_factory: async_sessionmaker[AsyncSession]) -> Iterator[Container]:
    """Application container bound to the test database."""
    container.session_factory.override(session_factory)
    try:
        yield container
    finally:
        container.stack_cache.reset()
        container.session_factory.reset_override()


@pytest.fixture
def stack_cache(app_container: Container) -> StackCache:
    return app_container.stack_cache()


@pytest.fixture
def stack_use_case(app_container: Container) -> StackUseCase:
    return app_container.stack_use_case()


@pytest.fixture
def flashcard_use_case(app_container: Container) -> FlashcardUseCase:
    return app_container.flashcard_use_case()


@pytest.fixture
def study_session_use_case(app_container: Container) -> StudySessionUseCase:
    return app_container.study_session_use_case()


async def create_test_stack(
    session_factory: async_sessionmaker[AsyncSession],
    name: str = "Algebra",
    flashcards: Iterable[tuple[str, str]] = (),
    study_sessions: Iterable[tuple[datetime, int]] = (),
) -> int:
    """Insert a stack and its children directly, bypassing the use cases and the cache."""
    async with session_factory() as session:
        stack = models.Stack(name=name)
        session.add(stack)
        await session.flush()
        for front, back in flashcards:
            session.add(models.Flashcard(stack_id=stack.id, front=front, back=back))
        for study_time, score in study_sessions:
            session.add(models.StudySession(stack_id=stack.id, study_time=study_time, score=score))
        await session.commit()
        return stack.id
