#!/usr/bin/env python3
"""
Swipe Coordinator - reconciles Like/Pass actions into mutual matches.

Per unordered pair {u, v} the coordinator drives:
    NO_ACTION / PASSED --Like(u->v)--> ONE_SIDED_LIKE(u->v)
    ONE_SIDED_LIKE(v->u) --Like(u->v)--> MATCHED
    any --Pass(u->v)--> only the u->v direction changes; matches are never deleted

Mutual-like detection writes the caller's Like first and only then reads the
opposite direction. Of two racing Likes at least one observes the other, and
the store's insert-if-absent on the canonical pair lets exactly one of them
create the match. The other reports created=False with the same match id.
"""

import logging
from typing import Callable, List, Optional

from core.errors import InvalidActor, NotFound
from core.profiles import ProfileProvider
from core.swipe.models import (
    LikeResult, MatchRecord, PairState, PairStatus, PassResult, SwipeDecision
)
from core.swipe.store import SwipeStore
from core.utils import canonical_pair

logger = logging.getLogger(__name__)

MatchListener = Callable[[MatchRecord], None]


class SwipeCoordinator:
    """
    Records unilateral Like/Pass actions and creates matches exactly once.

    Args:
        store: Persistence for actions and matches
        profiles: Optional provider used to reject swipes on unknown users
        on_match: Optional listener invoked once per newly created match
    """

    def __init__(
        self,
        store: SwipeStore,
        profiles: Optional[ProfileProvider] = None,
        on_match: Optional[MatchListener] = None
    ):
        self.store = store
        self.profiles = profiles
        self.on_match = on_match

    def _validate(self, actor_id: str, target_id: str) -> None:
        if actor_id == target_id:
            raise InvalidActor(f"User {actor_id} cannot swipe on themselves")
        if self.profiles is not None:
            for user_id in (actor_id, target_id):
                if not self.profiles.profile_exists(user_id):
                    raise NotFound(user_id)

    def record_like(self, actor_id: str, target_id: str) -> LikeResult:
        """Record Like(actor -> target) and create the match on a mutual like.

        Returns:
            LikeResult with created=True only for the call that created the match

        Raises:
            InvalidActor: if actor_id == target_id
            NotFound: if either user is unknown to the profile provider
            Unavailable: if the store cannot be reached
            Conflict: if the store could not resolve a match creation race
        """
        actor_id, target_id = str(actor_id), str(target_id)
        self._validate(actor_id, target_id)

        changed = self.store.record_action(actor_id, target_id, SwipeDecision.LIKE)
        if changed:
            logger.info(f"User {actor_id} liked {target_id}")

        low, high = canonical_pair(actor_id, target_id)

        if self.store.get_action(target_id, actor_id) is SwipeDecision.LIKE:
            match, created = self.store.insert_match_if_absent(low, high)
            if created:
                logger.info(f"Match {match.match_id} created for {low} <-> {high}")
                self._notify(match)
            return LikeResult(created=created, match_id=match.match_id)

        existing = self.store.get_match(low, high)
        return LikeResult(created=False, match_id=existing.match_id if existing else None)

    def record_pass(self, actor_id: str, target_id: str) -> PassResult:
        """Record Pass(actor -> target). Existing matches are left untouched."""
        actor_id, target_id = str(actor_id), str(target_id)
        self._validate(actor_id, target_id)

        if self.store.record_action(actor_id, target_id, SwipeDecision.PASS):
            logger.info(f"User {actor_id} passed on {target_id}")
        return PassResult(acknowledged=True)

    def pair_state(self, user_id_a: str, user_id_b: str) -> PairStatus:
        user_id_a, user_id_b = str(user_id_a), str(user_id_b)
        if user_id_a == user_id_b:
            raise InvalidActor("A pair needs two distinct users")

        low, high = canonical_pair(user_id_a, user_id_b)
        match = self.store.get_match(low, high)

        a_to_b = self.store.get_action(user_id_a, user_id_b)
        b_to_a = self.store.get_action(user_id_b, user_id_a)
        liked_by = frozenset(
            actor for actor, decision in ((user_id_a, a_to_b), (user_id_b, b_to_a))
            if decision is SwipeDecision.LIKE
        )

        if match is not None:
            return PairStatus(PairState.MATCHED, liked_by, match.match_id)
        if liked_by:
            return PairStatus(PairState.ONE_SIDED_LIKE, liked_by)
        if SwipeDecision.PASS in (a_to_b, b_to_a):
            return PairStatus(PairState.PASSED)
        return PairStatus(PairState.NO_ACTION)

    def list_matches(self, user_id: str, active_only: bool = True) -> List[MatchRecord]:
        return self.store.list_matches(str(user_id), active_only=active_only)

    def _notify(self, match: MatchRecord) -> None:
        if self.on_match is None:
            return
        try:
            self.on_match(match)
        except Exception as e:
            # match is already committed
            logger.error(f"Match listener failed for {match.match_id}: {e}", exc_info=True)
