import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, or_

from database.models import Match
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_match(self, user_id_low: str, user_id_high: str) -> Optional[Match]:
        stmt = select(Match).where(
            Match.user_id_low == user_id_low,
            Match.user_id_high == user_id_high
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def insert_if_absent(self, user_id_low: str, user_id_high: str) -> bool:
        """Insert the match for a canonical pair unless the pair already has one.

        Relies on the uq_match_pair constraint, so concurrent inserts from
        separate sessions or service instances create at most one row.

        Returns:
            True if this call inserted the row
        """
        stmt = self.upsert_insert(Match).values(
            id=str(uuid.uuid4()),
            user_id_low=user_id_low,
            user_id_high=user_id_high,
            matched_at=datetime.now(timezone.utc),
            is_active=True
        ).on_conflict_do_nothing(
            index_elements=['user_id_low', 'user_id_high']
        )
        result = self.db.execute(stmt)
        if result.rowcount != 1:
            logger.debug(f"Match for {user_id_low} <-> {user_id_high} already exists")
            return False
        return True

    def get_matches_for_user(self, user_id: str, active_only: bool = True) -> List[Match]:
        stmt = select(Match).where(
            or_(Match.user_id_low == user_id, Match.user_id_high == user_id)
        )

        if active_only:
            stmt = stmt.where(Match.is_active.is_(True))

        stmt = stmt.order_by(Match.matched_at.desc())
        return self.db.execute(stmt).scalars().all()
