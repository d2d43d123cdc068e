"""
Unit-of-work session scope shared by the SQLAlchemy repositories.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pager_for_content_type.infrastructure.database.operations import get_db_session
from pager_for_content_type.infrastructure.utilities.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def managed_session(
    session_factory: Optional[Callable[[], Session]] = None,
    operation: str = "database",
) -> Generator[Session, None, None]:
    """
    Open a session, commit when the block completes and roll back otherwise.

    Args:
        session_factory: Callable returning a new session. Defaults to the
            global database manager.
        operation: Name reported on the StoreUnavailableError raised when
            the database cannot be reached or the commit fails.

    Raises:
        StoreUnavailableError: Wrapping any SQLAlchemyError, including one
            raised while opening the session.
    """
    try:
        session = (session_factory or get_db_session)()
    except SQLAlchemyError as e:
        logger.error("Could not open a session for %s: %s", operation, e)
        raise StoreUnavailableError(f"{operation} failed: {e}", operation) from e

    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        logger.error("%s failed, rolling back: %s", operation, e)
        session.rollback()
        raise StoreUnavailableError(f"{operation} failed: {e}", operation) from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
