import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.exceptions import DuplicateEntry, InternalError

logger = logging.getLogger(__name__)


def db_exception(func):
    """Translate SQLAlchemy failures raised by ``func`` into app exceptions."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError as e:
            # Most likely a unique constraint (slug, username, email)
            logger.warning(f"Integrity error in {func.__name__}: {e.orig}")
            raise DuplicateEntry()
        except SQLAlchemyError as e:
            logger.error(f"Database error in {func.__name__}: {e}", exc_info=True)
            raise InternalError("Database error occurred")

    return wrapper
