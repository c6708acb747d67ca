import contextlib
import logging

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import sessionmaker

from core.errors import Unavailable
from database.database import db_session_scope
from database.repository import MatchingRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def matching_uow(session_factory: sessionmaker):
    """Per-unit-of-work transaction scope.

    Yields a MatchingRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes. Connectivity failures surface as
    Unavailable immediately; nothing is retried here.

    Usage:
        with matching_uow(factory) as repo:
            repo.swipes.upsert_decision(actor_id, target_id, 'like')
        # commit happens automatically on successful exit
    """
    try:
        with db_session_scope(session_factory) as session:
            yield MatchingRepository(session)
    except (OperationalError, InterfaceError) as e:
        logger.error(f"Matching store unavailable: {e}")
        raise Unavailable("Matching store unavailable") from e
