"""Custom exception hierarchy for the flashcards data-access layer."""


class FlashcardsError(Exception):
    """Base exception for all flashcards errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(FlashcardsError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class StackNotFoundError(NotFoundError):
    """Stack not found error."""

    def __init__(self, stack_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with stack ID or custom message."""
        self.stack_id = stack_id
        if message:
            super().__init__(message)
        elif stack_id is not None:
            super().__init__(f"Stack with id {stack_id} not found")
        else:
            super().__init__("Stack not found")


class StorageUnavailableError(FlashcardsError):
    """The relational store could not be reached or dropped the connection."""

    def __init__(self, operation: str, reason: str | None = None) -> None:
        """Initialize with the failed operation and optional driver reason."""
        self.operation = operation
        self.reason = reason
        message = f"Storage unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, status_code=503)
