from .flashcard_repository import FlashcardRepositoryProtocol
from .row_source import StackRowSourceProtocol
from .stack_repository import StackRepositoryProtocol
from .study_session_repository import StudySessionRepositoryProtocol

__all__ = [
    "FlashcardRepositoryProtocol",
    "StackRepositoryProtocol",
    "StackRowSourceProtocol",
    "StudySessionRepositoryProtocol",
]
