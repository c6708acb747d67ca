import logging
from datetime import datetime, timezone
from typing import Optional, Set

from sqlalchemy import select

from database.models import SwipeAction, SwipeEvent
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SwipeRepository(BaseRepository):
    def get_decision(self, actor_id: str, target_id: str) -> Optional[str]:
        stmt = select(SwipeAction.decision).where(
            SwipeAction.actor_id == actor_id,
            SwipeAction.target_id == target_id
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert_decision(self, actor_id: str, target_id: str, decision: str) -> bool:
        """Set the current decision for an edge, appending an audit event on change.

        The conditional upsert only touches the row when the decision differs,
        so rowcount is 0 for a repeated decision and 1 for an insert or change.

        Returns:
            True if the stored decision changed
        """
        now = datetime.now(timezone.utc)
        insert = self.upsert_insert(SwipeAction)
        stmt = insert.values(
            actor_id=actor_id,
            target_id=target_id,
            decision=decision,
            updated_at=now
        ).on_conflict_do_update(
            index_elements=['actor_id', 'target_id'],
            set_={
                'decision': insert.excluded.decision,
                'updated_at': insert.excluded.updated_at
            },
            where=SwipeAction.decision != insert.excluded.decision
        )
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            logger.debug(f"Decision {actor_id} -> {target_id} already {decision}")
            return False

        self.db.add(SwipeEvent(
            actor_id=actor_id,
            target_id=target_id,
            decision=decision,
            created_at=now
        ))
        self.db.flush()
        return True

    def get_acted_targets(self, actor_id: str) -> Set[str]:
        stmt = select(SwipeAction.target_id).where(SwipeAction.actor_id == actor_id)
        return set(self.db.execute(stmt).scalars().all())

    def count_events(self, actor_id: str, target_id: str) -> int:
        stmt = select(SwipeEvent.id).where(
            SwipeEvent.actor_id == actor_id,
            SwipeEvent.target_id == target_id
        )
        return len(self.db.execute(stmt).scalars().all())
