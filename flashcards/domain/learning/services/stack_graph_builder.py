"""
Domain service that folds left-join rows into stack aggregates.

This is a pure domain service with no infrastructure dependencies.
"""

from collections.abc import AsyncIterable, Iterable
from dataclasses import dataclass, field

from flashcards.domain.common.value_objects import FlashcardId, StackId, StudySessionId
from flashcards.domain.learning.entities import Flashcard, Stack, StudySession
from flashcards.domain.learning.exceptions import MalformedRowError
from flashcards.domain.learning.value_objects import (
    FlashcardRow,
    JoinRow,
    StackRow,
    StudySessionRow,
)


@dataclass
class _StackDraft:
    """Mutable accumulator for one stack while rows are being folded."""

    id: StackId
    name: str
    flashcards: dict[FlashcardId, Flashcard] = field(default_factory=dict)
    study_sessions: dict[StudySessionId, StudySession] = field(default_factory=dict)

    def freeze(self) -> Stack:
        return Stack.create_with_id(
            id=self.id,
            name=self.name,
            flashcards=tuple(self.flashcards.values()),
            study_sessions=tuple(self.study_sessions.values()),
        )


class StackGraphBuilder:
    """
    Builds the stack graph from the flat join row stream.

    Joining stacks against two independent one-to-many relations yields
    max(1, F) x max(1, S) rows per stack, so every flashcard and study
    session shows up repeatedly. Children are de-duplicated by id, the
    first occurrence wins, and stacks keep their first-seen order.

    Each call works on its own local drafts, so one builder can serve
    any number of rebuilds.
    """

    def build(self, rows: Iterable[JoinRow]) -> dict[StackId, Stack]:
        """
        Fold join rows into stack aggregates.

        Args:
            rows: Join rows in query order

        Returns:
            Ordered mapping of stack id to fully populated stack

        Raises:
            MalformedRowError: If a row has no stack id
        """
        drafts: dict[StackId, _StackDraft] = {}
        for row in rows:
            self._fold(drafts, row)
        return self._freeze(drafts)

    async def build_async(self, rows: AsyncIterable[JoinRow]) -> dict[StackId, Stack]:
        """Same as build(), consuming an asynchronous row stream."""
        drafts: dict[StackId, _StackDraft] = {}
        async for row in rows:
            self._fold(drafts, row)
        return self._freeze(drafts)

    def _fold(self, drafts: dict[StackId, _StackDraft], row: JoinRow) -> None:
        draft = self._draft_for(drafts, row)

        if row.flashcard is not None:
            flashcard = self._to_flashcard(row.flashcard)
            if flashcard.id not in draft.flashcards:
                draft.flashcards[flashcard.id] = flashcard

        if row.study_session is not None:
            study_session = self._to_study_session(row.study_session)
            if study_session.id not in draft.study_sessions:
                draft.study_sessions[study_session.id] = study_session

    def _draft_for(self, drafts: dict[StackId, _StackDraft], row: JoinRow) -> _StackDraft:
        stack_row: StackRow = row.stack
        if stack_row.id is None:
            raise MalformedRowError(row)

        stack_id = StackId(stack_row.id)
        draft = drafts.get(stack_id)
        if draft is None:
            draft = _StackDraft(id=stack_id, name=stack_row.name or "")
            drafts[stack_id] = draft
        return draft

    @staticmethod
    def _to_flashcard(row: FlashcardRow) -> Flashcard:
        return Flashcard.create_with_id(
            id=FlashcardId(row.id),
            stack_id=StackId(row.stack_id),
            front=row.front,
            back=row.back,
        )

    @staticmethod
    def _to_study_session(row: StudySessionRow) -> StudySession:
        return StudySession.create_with_id(
            id=StudySessionId(row.id),
            stack_id=StackId(row.stack_id),
            study_time=row.study_time,
            score=row.score,
        )

    @staticmethod
    def _freeze(drafts: dict[StackId, _StackDraft]) -> dict[StackId, Stack]:
        return {stack_id: draft.freeze() for stack_id, draft in drafts.items()}
