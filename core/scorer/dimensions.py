#!/usr/bin/env python3
"""
Per-dimension compatibility strategies.

Each dimension is an independent strategy with the same contract:
    (a, b, config) -> DimensionOutcome

Descriptions are looked up from ordered (min_score, template) bands owned by
the dimension, so the text always agrees with the bucket the score fell in.
Every strategy is symmetric in (a, b).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

from core.config_loader import ScorerConfig
from core.scorer.models import ProfileSnapshot


@dataclass(frozen=True)
class DimensionOutcome:
    score: float
    context: Dict[str, Any] = field(default_factory=dict)
    has_data: bool = True


@dataclass(frozen=True)
class DescriptionBand:
    min_score: float
    template: str


DimensionFn = Callable[[ProfileSnapshot, ProfileSnapshot, ScorerConfig], DimensionOutcome]


@dataclass(frozen=True)
class Dimension:
    name: str
    strategy: DimensionFn
    bands: Tuple[DescriptionBand, ...]
    no_data_text: Optional[str] = None

    def evaluate(self, a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> Tuple[float, str]:
        outcome = self.strategy(a, b, config)
        score = _clamp01(outcome.score)
        if not outcome.has_data and self.no_data_text:
            return score, self.no_data_text
        return score, describe(score, self.bands, outcome.context)


# ----------------------------
# Helpers
# ----------------------------
def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, float(x)))


def describe(score: float, bands: Tuple[DescriptionBand, ...], context: Dict[str, Any]) -> str:
    for band in bands:
        if score >= band.min_score:
            return band.template.format(**context)
    return bands[-1].template.format(**context)


def set_overlap(tags_a: FrozenSet[str], tags_b: FrozenSet[str]) -> float:
    """Jaccard overlap: shared tags over the union."""
    union = tags_a | tags_b
    if not union:
        return 0.0
    return len(tags_a & tags_b) / len(union)


def _accepts(preference: Optional[str], gender: Optional[str]) -> Optional[bool]:
    """None when the preference is open, else whether it is satisfied."""
    if preference is None:
        return None
    return preference == gender


# ----------------------------
# Strategies
# ----------------------------
def age_score(a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> DimensionOutcome:
    diff = abs(a.age - b.age)
    score = max(config.age_min_score, 1.0 - diff / config.age_max_spread)
    return DimensionOutcome(score=score, context={"diff": diff})


GENDER_SELF = "Same profile"
GENDER_PREFERENCES_MET = "Gender preferences fully compatible"
GENDER_SAME = "Same gender - often preferred for roommates"
GENDER_DIFFERENT = "Different genders - still compatible"
GENDER_NOT_MET = "Gender preference not met"


def gender_score(a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> DimensionOutcome:
    # a profile never conflicts with itself, whatever it prefers in others
    if a.user_id == b.user_id:
        return DimensionOutcome(score=1.0, context={"summary": GENDER_SELF})

    a_accepts = _accepts(a.gender_preference, b.gender)
    b_accepts = _accepts(b.gender_preference, a.gender)

    if a_accepts is False or b_accepts is False:
        return DimensionOutcome(score=config.gender_mismatch_score, context={"summary": GENDER_NOT_MET})
    if a_accepts and b_accepts:
        return DimensionOutcome(score=1.0, context={"summary": GENDER_PREFERENCES_MET})
    if a.gender == b.gender:
        return DimensionOutcome(score=1.0, context={"summary": GENDER_SAME})
    return DimensionOutcome(score=config.gender_open_score, context={"summary": GENDER_DIFFERENT})


def university_score(a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> DimensionOutcome:
    if a.university.casefold() == b.university.casefold():
        return DimensionOutcome(score=1.0)
    return DimensionOutcome(score=config.university_mismatch_score)


def _tag_outcome(tags_a: FrozenSet[str], tags_b: FrozenSet[str], config: ScorerConfig) -> DimensionOutcome:
    # no data on either side is neutral, not a penalty
    if not tags_a or not tags_b:
        return DimensionOutcome(score=config.neutral_score, has_data=False)
    shared = tags_a & tags_b
    return DimensionOutcome(
        score=set_overlap(tags_a, tags_b),
        context={"shared": len(shared)},
    )


def lifestyle_score(a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> DimensionOutcome:
    return _tag_outcome(a.lifestyle, b.lifestyle, config)


def interests_score(a: ProfileSnapshot, b: ProfileSnapshot, config: ScorerConfig) -> DimensionOutcome:
    return _tag_outcome(a.interests, b.interests, config)


# ----------------------------
# Description tables
# ----------------------------
AGE_BANDS = (
    DescriptionBand(1.0, "Same age - perfect match!"),
    DescriptionBand(0.8, "{diff} year(s) difference - very compatible"),
    DescriptionBand(0.0, "{diff} year(s) difference - some age gap"),
)

# gender text depends on which rule decided the score, not on the score alone
GENDER_BANDS = (
    DescriptionBand(0.0, "{summary}"),
)

UNIVERSITY_BANDS = (
    DescriptionBand(1.0, "Same university - great for commuting together"),
    DescriptionBand(0.0, "Different universities - manageable"),
)

LIFESTYLE_BANDS = (
    DescriptionBand(1.0, "Same lifestyle - excellent compatibility"),
    DescriptionBand(0.6, "Compatible lifestyles"),
    DescriptionBand(0.0, "Different lifestyles - may need compromise"),
)

INTERESTS_BANDS = (
    DescriptionBand(0.7, "Many shared interests - great for bonding"),
    DescriptionBand(0.4, "Some common interests - good foundation"),
    DescriptionBand(0.0, "Different interests - opportunity to learn from each other"),
)

DIMENSIONS: Tuple[Dimension, ...] = (
    Dimension("age", age_score, AGE_BANDS),
    Dimension("gender", gender_score, GENDER_BANDS),
    Dimension("university", university_score, UNIVERSITY_BANDS),
    Dimension("lifestyle", lifestyle_score, LIFESTYLE_BANDS,
              no_data_text="Not enough lifestyle information to compare"),
    Dimension("interests", interests_score, INTERESTS_BANDS,
              no_data_text="Not enough interest information to compare"),
)

