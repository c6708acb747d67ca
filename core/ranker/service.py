#!/usr/bin/env python3
"""
Candidate Ranker - orders a candidate pool by compatibility with a requester.

Resolves live profile snapshots through the ProfileProvider and scores each
candidate with the CompatibilityScorer. Failures resolving or scoring an
individual candidate drop that candidate only; failures resolving the
requester abort the ranking.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

from core.config_loader import RankerConfig
from core.errors import MissingAttribute, NotFound, Unavailable
from core.profiles import ProfileProvider
from core.scorer.models import CompatibilityResult
from core.scorer.service import CompatibilityScorer, validate_snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedCandidate:
    user_id: str
    result: CompatibilityResult


class CandidateRanker:
    """
    Ranks candidates by composite compatibility score.

    Ordering is descending by composite score with ties broken by candidate
    id, so identical inputs always produce the same list. Previously passed or
    matched candidates are not filtered here; that policy belongs to the caller.
    """

    def __init__(
        self,
        profiles: ProfileProvider,
        scorer: CompatibilityScorer,
        config: Optional[RankerConfig] = None
    ):
        self.profiles = profiles
        self.scorer = scorer
        self.config = config or RankerConfig()

    def _resolve_limit(self, limit: Optional[int]) -> int:
        if limit is None:
            return self.config.default_limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        return min(limit, self.config.max_limit)

    def compatibility_between(self, user_id_a: str, user_id_b: str) -> CompatibilityResult:
        """Score two users by id.

        Raises:
            NotFound: if either profile does not exist
            MissingAttribute: if either profile lacks a required attribute
        """
        a = self.profiles.get_profile_snapshot(str(user_id_a))
        b = self.profiles.get_profile_snapshot(str(user_id_b))
        return self.scorer.score(a, b)

    def rank(
        self,
        requester_id: str,
        candidate_ids: Iterable[str],
        limit: Optional[int] = None
    ) -> List[RankedCandidate]:
        """Rank candidates for a requester.

        Args:
            requester_id: User the ranking is for
            candidate_ids: Candidate pool; the requester and duplicates are ignored
            limit: Maximum results (None = configured default, capped at max_limit)

        Returns:
            RankedCandidate list, best match first

        Raises:
            NotFound: if the requester's profile does not exist
            MissingAttribute: if the requester's profile cannot be scored
            ValueError: if limit < 1
        """
        requester_id = str(requester_id)
        limit = self._resolve_limit(limit)

        requester = self.profiles.get_profile_snapshot(requester_id)
        validate_snapshot(requester)

        seen = {requester_id}
        ranked: List[RankedCandidate] = []
        skipped = 0

        for candidate_id in candidate_ids:
            candidate_id = str(candidate_id)
            if candidate_id in seen:
                continue
            seen.add(candidate_id)

            try:
                candidate = self.profiles.get_profile_snapshot(candidate_id)
                result = self.scorer.score(requester, candidate)
            except (NotFound, MissingAttribute, Unavailable) as e:
                logger.warning(f"Skipping candidate {candidate_id} for {requester_id}: {e}")
                skipped += 1
                continue

            ranked.append(RankedCandidate(user_id=candidate_id, result=result))

        ranked.sort(key=lambda r: (-r.result.composite_score, r.user_id))

        logger.info(
            f"Ranked {len(ranked)} candidates for {requester_id} "
            f"(skipped {skipped}), returning top {min(limit, len(ranked))}"
        )
        return ranked[:limit]
