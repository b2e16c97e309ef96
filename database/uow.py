import contextlib
import logging
from typing import Callable, Optional

from sqlalchemy import exc as sa_exc
from sqlalchemy.orm import Session

from core.errors import DependencyUnavailable
from database.database import SessionLocal, set_statement_timeout
from database.repository import CareerRepository

logger = logging.getLogger(__name__)

# Store failures that a caller may retry: lost connections, lock or statement
# timeouts, and pool checkout timeouts.
TRANSIENT_DB_ERRORS = (sa_exc.OperationalError, sa_exc.TimeoutError)


@contextlib.contextmanager
def career_uow(
    session_factory: Optional[Callable[[], Session]] = None,
    timeout_seconds: Optional[float] = None,
):
    """Per-unit-of-work transaction scope.

    Yields a CareerRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes. Transient store errors surface as
    DependencyUnavailable so callers can retry the whole unit.

    Usage:
        with career_uow(timeout_seconds=5) as repo:
            job = repo.jobs.get(job_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        if timeout_seconds:
            set_statement_timeout(session.connection(), timeout_seconds)
        repo = CareerRepository(session)
        yield repo
        session.commit()
    except TRANSIENT_DB_ERRORS as e:
        session.rollback()
        logger.warning(f"Unit of work aborted by store error: {e}")
        raise DependencyUnavailable("data store unavailable or timed out") from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
