from .flashcard import Flashcard
from .stack import Stack
from .study_session import StudySession

__all__ = [
    "Flashcard",
    "Stack",
    "StudySession",
]
