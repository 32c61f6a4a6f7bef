"""Value objects of the learning module."""

from .join_row import FlashcardRow, JoinRow, StackRow, StudySessionRow

__all__ = [
    "FlashcardRow",
    "JoinRow",
    "StackRow",
    "StudySessionRow",
]
