"""Translation of driver errors into application errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import StoreError

logger = structlog.get_logger()


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy failure inside the block as StoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("store_operation_failed", operation=operation, error=str(exc))
        raise StoreError(f"{operation} failed") from exc
