from .flashcard_repository import FlashcardRepository
from .stack_join_row_source import StackJoinRowSource
from .stack_repository import StackRepository
from .study_session_repository import StudySessionRepository

__all__ = [
    "FlashcardRepository",
    "StackJoinRowSource",
    "StackRepository",
    "StudySessionRepository",
]
