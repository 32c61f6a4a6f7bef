from .flashcard_use_case import FlashcardUseCase
from .stack_use_case import StackUseCase
from .study_session_use_case import StudySessionUseCase

__all__ = [
    "FlashcardUseCase",
    "StackUseCase",
    "StudySessionUseCase",
]
