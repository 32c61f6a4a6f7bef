"""Protocol for the stack join row source."""

from collections.abc import AsyncGenerator
from typing import Protocol

from flashcards.domain.learning.value_objects import JoinRow


class StackRowSourceProtocol(Protocol):
    """Executes the stack/flashcard/study-session left join."""

    def stream(self) -> AsyncGenerator[JoinRow, None]:
        """
        Stream every join row.

        Returns:
            Async generator of join rows, one per stack x flashcard x study session
            combination, with absent children set to None

        Raises:
            StorageUnavailableError: If the store cannot be reached
        """
        ...
