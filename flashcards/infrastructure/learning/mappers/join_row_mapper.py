"""Mapper for positional join result rows ↔ JoinRow projections."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import InstrumentedAttribute

from flashcards.domain.learning.value_objects import (
    FlashcardRow,
    JoinRow,
    StackRow,
    StudySessionRow,
)
from flashcards.models import Flashcard as FlashcardORM
from flashcards.models import Stack as StackORM
from flashcards.models import StudySession as StudySessionORM

# Each group starts with its id column; those are the split points.
STACK_COLUMNS: tuple[InstrumentedAttribute[Any], ...] = (StackORM.id, StackORM.name)
FLASHCARD_COLUMNS: tuple[InstrumentedAttribute[Any], ...] = (
    FlashcardORM.id,
    FlashcardORM.stack_id,
    FlashcardORM.front,
    FlashcardORM.back,
)
STUDY_SESSION_COLUMNS: tuple[InstrumentedAttribute[Any], ...] = (
    StudySessionORM.id,
    StudySessionORM.stack_id,
    StudySessionORM.study_time,
    StudySessionORM.score,
)


class JoinRowMapper:
    """
    Split-column mapper for the stack/flashcard/study-session join.

    A row is the three column groups laid end to end. The row is cut at
    the flashcard id and study session id columns; a child group whose
    id column is NULL had no matching row and maps to None.
    """

    def __init__(self) -> None:
        self._flashcard_at = len(STACK_COLUMNS)
        self._study_session_at = self._flashcard_at + len(FLASHCARD_COLUMNS)
        self._width = self._study_session_at + len(STUDY_SESSION_COLUMNS)

    @property
    def columns(self) -> tuple[InstrumentedAttribute[Any], ...]:
        """Columns to select, in the order this mapper reads them."""
        return STACK_COLUMNS + FLASHCARD_COLUMNS + STUDY_SESSION_COLUMNS

    def split(
        self, row: Sequence[Any]
    ) -> tuple[tuple[Any, ...], tuple[Any, ...], tuple[Any, ...]]:
        """Cut a positional row into its stack, flashcard and study session groups."""
        values = tuple(row)
        if len(values) != self._width:
            raise ValueError(f"Expected {self._width} columns in join row, got {len(values)}")
        return (
            values[: self._flashcard_at],
            values[self._flashcard_at : self._study_session_at],
            values[self._study_session_at :],
        )

    def to_join_row(self, row: Sequence[Any]) -> JoinRow:
        """Convert a positional result row to a JoinRow."""
        stack_values, flashcard_values, study_session_values = self.split(row)
        return JoinRow(
            stack=StackRow(*stack_values),
            flashcard=FlashcardRow(*flashcard_values) if flashcard_values[0] is not None else None,
            study_session=(
                StudySessionRow(*study_session_values)
                if study_session_values[0] is not None
                else None
            ),
        )
