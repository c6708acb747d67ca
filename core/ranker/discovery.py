"""Discovery feed - ranks every profile the user has not swiped on yet."""
import logging
from typing import List, Optional

from core.profiles import ProfileProvider
from core.ranker.service import CandidateRanker, RankedCandidate
from core.swipe.store import SwipeStore

logger = logging.getLogger(__name__)


class DiscoveryService:
    def __init__(self, profiles: ProfileProvider, ranker: CandidateRanker, swipes: SwipeStore):
        self.profiles = profiles
        self.ranker = ranker
        self.swipes = swipes

    def discover(self, user_id: str, limit: Optional[int] = None) -> List[RankedCandidate]:
        user_id = str(user_id)
        acted = self.swipes.acted_targets(user_id)
        pool = [
            candidate_id for candidate_id in self.profiles.list_user_ids()
            if candidate_id != user_id and candidate_id not in acted
        ]
        logger.debug(f"Discovery pool for {user_id}: {len(pool)} candidates ({len(acted)} already swiped)")
        return self.ranker.rank(user_id, pool, limit)
