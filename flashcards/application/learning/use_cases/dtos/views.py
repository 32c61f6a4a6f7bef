"""Read views projected from the cached stack graph."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from flashcards.domain.learning.entities import Flashcard, Stack, StudySession


class StackInfo(BaseModel):
    """Stack without its children."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str

    @classmethod
    def from_entity(cls, stack: Stack) -> "StackInfo":
        return cls(id=stack.id.value, name=stack.name)


class FlashcardInfo(BaseModel):
    """Flashcard content."""

    model_config = ConfigDict(frozen=True)

    id: int
    front: str
    back: str

    @classmethod
    def from_entity(cls, flashcard: Flashcard) -> "FlashcardInfo":
        return cls(id=flashcard.id.value, front=flashcard.front, back=flashcard.back)


class PlayStack(BaseModel):
    """Stack with the flashcards needed to run a study session."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    flashcards: list[FlashcardInfo] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, stack: Stack) -> "PlayStack":
        return cls(
            id=stack.id.value,
            name=stack.name,
            flashcards=[FlashcardInfo.from_entity(f) for f in stack.flashcards],
        )


class StudySessionInfo(BaseModel):
    """Study session labelled with the name of its stack."""

    model_config = ConfigDict(frozen=True)

    id: int
    stack_name: str
    study_time: datetime
    score: int

    @classmethod
    def from_entity(cls, study_session: StudySession, stack: Stack) -> "StudySessionInfo":
        return cls(
            id=study_session.id.value,
            stack_name=stack.name,
            study_time=study_session.study_time,
            score=study_session.score,
        )
