from .commands import FlashcardContent
from .views import FlashcardInfo, PlayStack, StackInfo, StudySessionInfo

__all__ = [
    "FlashcardContent",
    "FlashcardInfo",
    "PlayStack",
    "StackInfo",
    "StudySessionInfo",
]
