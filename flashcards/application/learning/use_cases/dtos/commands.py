"""Inputs for write use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FlashcardContent:
    """Front and back of a flashcard that does not exist yet."""

    front: str
    back: str
