"""Translation of persistence errors into StorageFailure."""

from contextlib import contextmanager

from protean.exceptions import ObjectNotFoundError, ValidationError

from ratings.exceptions import RatingsError, StorageFailure
from ratings.utils.logging import get_logger

logger = get_logger(__name__)

# Errors that already carry meaning for the caller
_DOMAIN_ERRORS = (ValidationError, ObjectNotFoundError, RatingsError)


@contextmanager
def storage_guard(operation: str, **context):
    """Re-raise anything unexpected from the block as StorageFailure.

    The original exception is logged with its traceback and chained, but its
    text never reaches the caller.
    """
    try:
        yield
    except _DOMAIN_ERRORS:
        raise
    except Exception as exc:
        logger.exception("storage_failure", operation=operation, **context)
        raise StorageFailure(operation) from exc
