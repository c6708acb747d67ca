import logging

from sqlalchemy.engine import Engine

from database.models import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create all matching tables that do not exist yet."""
    Base.metadata.create_all(engine)
    logger.info(f"Initialized tables: {', '.join(sorted(Base.metadata.tables))}")
