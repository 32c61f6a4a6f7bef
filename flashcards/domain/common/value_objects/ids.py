from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class StackId(EntityId):
    """Strongly-typed stack identifier."""


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""


@dataclass(frozen=True)
class StudySessionId(EntityId):
    """Strongly-typed study session identifier."""
