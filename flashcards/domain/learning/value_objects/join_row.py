"""
Projections of one row of the stack/flashcard/study-session left join.

The stack side is always present. Each child side is either a full
projection or ``None`` when the join found no matching row; the mapper
that builds these decides absence, downstream code only checks for None.
"""

from dataclasses import dataclass
from datetime import datetime

from flashcards.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class StackRow(ValueObject):
    """Stack columns of a join row. ``id`` is None only for malformed rows."""

    id: int | None
    name: str | None


@dataclass(frozen=True)
class FlashcardRow(ValueObject):
    """Flashcard columns of a join row."""

    id: int
    stack_id: int
    front: str
    back: str


@dataclass(frozen=True)
class StudySessionRow(ValueObject):
    """Study session columns of a join row."""

    id: int
    stack_id: int
    study_time: datetime
    score: int


@dataclass(frozen=True)
class JoinRow(ValueObject):
    """One stack combined with at most one flashcard and at most one study session."""

    stack: StackRow
    flashcard: FlashcardRow | None = None
    study_session: StudySessionRow | None = None
