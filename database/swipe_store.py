"""SwipeStore backed by SQLAlchemy; each operation runs in its own committed unit of work."""
from typing import List, Optional, Set, Tuple

from sqlalchemy.orm import sessionmaker

from core.errors import Conflict
from core.swipe.models import MatchRecord, SwipeDecision
from core.swipe.store import SwipeStore
from database.models import Match
from database.uow import matching_uow


def to_match_record(match: Match) -> MatchRecord:
    return MatchRecord(
        match_id=match.id,
        user_id_low=match.user_id_low,
        user_id_high=match.user_id_high,
        matched_at=match.matched_at,
        is_active=bool(match.is_active),
    )


class SqlSwipeStore(SwipeStore):
    """
    Durable SwipeStore shared by every service instance.

    Each call commits before returning, so a Like recorded by one instance is
    visible to the opposite side's read on any other instance. Match uniqueness
    is enforced by the uq_match_pair constraint via INSERT ... ON CONFLICT DO NOTHING.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def record_action(self, actor_id: str, target_id: str, decision: SwipeDecision) -> bool:
        with matching_uow(self.session_factory) as repo:
            return repo.swipes.upsert_decision(actor_id, target_id, decision.value)

    def get_action(self, actor_id: str, target_id: str) -> Optional[SwipeDecision]:
        with matching_uow(self.session_factory) as repo:
            value = repo.swipes.get_decision(actor_id, target_id)
        return SwipeDecision(value) if value is not None else None

    def acted_targets(self, actor_id: str) -> Set[str]:
        with matching_uow(self.session_factory) as repo:
            return repo.swipes.get_acted_targets(actor_id)

    def insert_match_if_absent(self, user_id_low: str, user_id_high: str) -> Tuple[MatchRecord, bool]:
        with matching_uow(self.session_factory) as repo:
            created = repo.matches.insert_if_absent(user_id_low, user_id_high)

        with matching_uow(self.session_factory) as repo:
            match = repo.matches.get_match(user_id_low, user_id_high)
            if match is None:
                raise Conflict(
                    f"Match for {user_id_low} <-> {user_id_high} was neither inserted nor found"
                )
            record = to_match_record(match)

        return record, created

    def get_match(self, user_id_low: str, user_id_high: str) -> Optional[MatchRecord]:
        with matching_uow(self.session_factory) as repo:
            match = repo.matches.get_match(user_id_low, user_id_high)
            return to_match_record(match) if match is not None else None

    def list_matches(self, user_id: str, active_only: bool = True) -> List[MatchRecord]:
        with matching_uow(self.session_factory) as repo:
            return [to_match_record(m) for m in repo.matches.get_matches_for_user(user_id, active_only)]
