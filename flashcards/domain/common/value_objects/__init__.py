"""Common value objects shared across all domain modules."""

from .ids import FlashcardId, StackId, StudySessionId

__all__ = [
    "FlashcardId",
    "StackId",
    "StudySessionId",
]
