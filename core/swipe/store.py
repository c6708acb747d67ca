"""
Swipe Store Interface - persistence contract for swipe actions and matches.

Every method is atomic and its effects are visible to other callers once it
returns; the coordinator's mutual-like detection depends on a recorded action
being readable by the opposite side before that side reads it back.
"""
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional, Set, Tuple

from core.swipe.models import MatchRecord, SwipeDecision


class SwipeStore(ABC):

    @abstractmethod
    def record_action(self, actor_id: str, target_id: str, decision: SwipeDecision) -> bool:
        """
        Set the current decision for actor -> target (last write wins).

        Appends an audit event only when the decision changes.

        Returns:
            True if the stored decision changed, False if it was already set
        """
        pass

    @abstractmethod
    def get_action(self, actor_id: str, target_id: str) -> Optional[SwipeDecision]:
        pass

    @abstractmethod
    def acted_targets(self, actor_id: str) -> Set[str]:
        """All targets the actor has liked or passed."""
        pass

    @abstractmethod
    def insert_match_if_absent(self, user_id_low: str, user_id_high: str) -> Tuple[MatchRecord, bool]:
        """
        Create the match for a canonical pair unless one already exists.

        Returns:
            (match, created) where created is True only for the call that inserted it
        """
        pass

    @abstractmethod
    def get_match(self, user_id_low: str, user_id_high: str) -> Optional[MatchRecord]:
        pass

    @abstractmethod
    def list_matches(self, user_id: str, active_only: bool = True) -> List[MatchRecord]:
        """Matches involving user_id, newest first."""
        pass


class InMemorySwipeStore(SwipeStore):
    """
    Process-local SwipeStore guarded by a single lock.

    Suitable for a single service instance and for tests; multi-instance
    deployments use the SQL store, which enforces pair uniqueness in the database.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._actions: Dict[Tuple[str, str], SwipeDecision] = {}
        self._events: List[Tuple[str, str, SwipeDecision, datetime]] = []
        self._matches: Dict[Tuple[str, str], MatchRecord] = {}

    @property
    def events(self) -> List[Tuple[str, str, SwipeDecision, datetime]]:
        with self._lock:
            return list(self._events)

    def record_action(self, actor_id: str, target_id: str, decision: SwipeDecision) -> bool:
        with self._lock:
            key = (actor_id, target_id)
            if self._actions.get(key) is decision:
                return False
            self._actions[key] = decision
            self._events.append((actor_id, target_id, decision, datetime.now(timezone.utc)))
            return True

    def get_action(self, actor_id: str, target_id: str) -> Optional[SwipeDecision]:
        with self._lock:
            return self._actions.get((actor_id, target_id))

    def acted_targets(self, actor_id: str) -> Set[str]:
        with self._lock:
            return {target for (actor, target) in self._actions if actor == actor_id}

    def insert_match_if_absent(self, user_id_low: str, user_id_high: str) -> Tuple[MatchRecord, bool]:
        with self._lock:
            key = (user_id_low, user_id_high)
            existing = self._matches.get(key)
            if existing is not None:
                return existing, False
            match = MatchRecord(
                match_id=str(uuid.uuid4()),
                user_id_low=user_id_low,
                user_id_high=user_id_high,
                matched_at=datetime.now(timezone.utc),
            )
            self._matches[key] = match
            return match, True

    def get_match(self, user_id_low: str, user_id_high: str) -> Optional[MatchRecord]:
        with self._lock:
            return self._matches.get((user_id_low, user_id_high))

    def list_matches(self, user_id: str, active_only: bool = True) -> List[MatchRecord]:
        with self._lock:
            matches = [
                m for m in self._matches.values()
                if user_id in (m.user_id_low, m.user_id_high) and (m.is_active or not active_only)
            ]
        return sorted(matches, key=lambda m: m.matched_at, reverse=True)
