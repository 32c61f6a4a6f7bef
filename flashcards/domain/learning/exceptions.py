"""Learning module domain exceptions."""

from flashcards.domain.common.exceptions import InvariantViolationError


class MalformedRowError(InvariantViolationError):
    """Raised when a join row has no stack identity (stack is the non-nullable side)."""

    def __init__(self, row: object) -> None:
        super().__init__("Stack", "join row is missing the stack id")
        self.details["row"] = row
        self.row = row
