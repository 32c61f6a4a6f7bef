"""Translation of driver connection failures into StorageUnavailableError."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError

from flashcards.exceptions import StorageUnavailableError

logger = structlog.get_logger(__name__)

# Errors meaning the store could not be reached or dropped the connection.
# Constraint violations and programming errors propagate unchanged.
UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, DisconnectionError, ConnectionError)


@asynccontextmanager
async def storage_errors(operation: str) -> AsyncIterator[None]:
    """
    Re-raise connection-level failures inside the block as StorageUnavailableError.

    Args:
        operation: Name of the storage operation, used in the error and log
    """
    try:
        yield
    except UNAVAILABLE_ERRORS as e:
        logger.error("storage_unavailable", operation=operation, error=str(e))
        raise StorageUnavailableError(operation, reason=str(e)) from e
