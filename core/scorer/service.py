#!/usr/bin/env python3
"""
Compatibility Scorer - multi-factor roommate compatibility.

Maps a pair of profile snapshots to:
- Per-dimension sub-scores (age, gender, university, lifestyle, interests)
- Composite Score: fixed weighted sum of the sub-scores (0.0-1.0)
- Compatibility level and per-dimension descriptions

The scorer is a pure function of the two snapshots and its configuration.
An optional CompatibilityCache short-circuits recomputation; cached entries
are keyed by a fingerprint of both snapshots, so stale scores are never served.
"""

from typing import Optional, TYPE_CHECKING
import logging
import numpy as np

from core.config_loader import ScorerConfig
from core.errors import MissingAttribute
from core.scorer.dimensions import DIMENSIONS
from core.scorer.models import CompatibilityResult, DimensionResult, ProfileSnapshot

if TYPE_CHECKING:
    from core.cache.compatibility_cache import CompatibilityCache

logger = logging.getLogger(__name__)

REQUIRED_ATTRIBUTES = ("age", "gender", "university")


def validate_snapshot(snapshot: ProfileSnapshot) -> None:
    """Raise MissingAttribute if a field required for scoring is absent."""
    for attribute in REQUIRED_ATTRIBUTES:
        if getattr(snapshot, attribute) in (None, ""):
            raise MissingAttribute(snapshot.user_id, attribute)
    if isinstance(snapshot.age, bool) or not isinstance(snapshot.age, int) or snapshot.age < 0:
        raise MissingAttribute(snapshot.user_id, "age")


def compatibility_level(score: float, config: ScorerConfig) -> str:
    for level in config.levels:
        if score >= level.min_score:
            return level.label
    return config.levels[-1].label


class CompatibilityScorer:
    """
    Scores two profiles across five independent dimensions.

    Dimension strategies and description bands live in core.scorer.dimensions;
    weights, decay spread and baseline scores come from ScorerConfig.
    """

    def __init__(
        self,
        config: Optional[ScorerConfig] = None,
        cache: Optional["CompatibilityCache"] = None
    ):
        self.config = config or ScorerConfig()
        self.cache = cache
        weights = self.config.weights.model_dump()
        self._weights = np.array([weights[d.name] for d in DIMENSIONS], dtype=float)

    def score(self, a: ProfileSnapshot, b: ProfileSnapshot) -> CompatibilityResult:
        """Calculate compatibility between two profile snapshots.

        Args:
            a: Snapshot of the first user
            b: Snapshot of the second user

        Returns:
            CompatibilityResult labelled in (a, b) order

        Raises:
            MissingAttribute: if either snapshot lacks age, gender or university
        """
        validate_snapshot(a)
        validate_snapshot(b)

        if self.cache is not None:
            cached = self.cache.get_result(a, b, self.config)
            if cached is not None:
                return cached.for_pair(a.user_id, b.user_id)

        result = self._compute(a, b)

        if self.cache is not None:
            self.cache.set_result(a, b, self.config, result)

        return result

    def _compute(self, a: ProfileSnapshot, b: ProfileSnapshot) -> CompatibilityResult:
        dimensions = {}
        scores = []
        for dimension in DIMENSIONS:
            sub_score, description = dimension.evaluate(a, b, self.config)
            dimensions[dimension.name] = DimensionResult(score=round(sub_score, 4), description=description)
            scores.append(sub_score)

        composite = round(float(np.dot(self._weights, np.array(scores, dtype=float))), 4)
        level = compatibility_level(composite, self.config)

        logger.debug(
            f"Compatibility {a.user_id} <-> {b.user_id}: composite={composite:.4f} ({level}), "
            + ", ".join(f"{name}={d.score:.2f}" for name, d in dimensions.items())
        )

        return CompatibilityResult(
            user_id_a=a.user_id,
            user_id_b=b.user_id,
            composite_score=composite,
            level=level,
            dimensions=dimensions,
        )
