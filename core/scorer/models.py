#!/usr/bin/env python3
"""
Scoring Models - Data structures for compatibility scoring.
"""

from typing import Any, Dict, FrozenSet, Iterable, Optional, Union
from dataclasses import dataclass, field, asdict

DIMENSION_NAMES = ("age", "gender", "university", "lifestyle", "interests")

OPEN_PREFERENCES = frozenset({"", "any", "none", "no preference"})

TagInput = Union[None, str, Iterable[str]]


def normalize_tags(tags: TagInput) -> FrozenSet[str]:
    """Normalize comma-separated text or an iterable of tags into a set."""
    if tags is None:
        return frozenset()
    if isinstance(tags, str):
        tags = tags.split(",")
    return frozenset(t.strip().lower() for t in tags if t and t.strip())


def normalize_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip().lower()
    return value or None


@dataclass(frozen=True)
class ProfileSnapshot:
    """Immutable view of the profile attributes used for scoring."""
    user_id: str
    age: Optional[int]
    gender: Optional[str]
    university: Optional[str]
    lifestyle: FrozenSet[str] = frozenset()
    interests: FrozenSet[str] = frozenset()
    gender_preference: Optional[str] = None

    @classmethod
    def build(
        cls,
        user_id: Any,
        age: Optional[int],
        gender: Optional[str],
        university: Optional[str],
        lifestyle: TagInput = None,
        interests: TagInput = None,
        gender_preference: Optional[str] = None,
    ) -> "ProfileSnapshot":
        preference = normalize_text(gender_preference)
        if preference in OPEN_PREFERENCES:
            preference = None
        return cls(
            user_id=str(user_id),
            age=age,
            gender=normalize_text(gender),
            university=university.strip() if university and university.strip() else None,
            lifestyle=normalize_tags(lifestyle),
            interests=normalize_tags(interests),
            gender_preference=preference,
        )

    def fingerprint_payload(self) -> Dict[str, Any]:
        """Deterministic, JSON-serializable view used for cache fingerprints."""
        return {
            "user_id": self.user_id,
            "age": self.age,
            "gender": self.gender,
            "university": self.university.casefold() if self.university else None,
            "lifestyle": sorted(self.lifestyle),
            "interests": sorted(self.interests),
            "gender_preference": self.gender_preference,
        }


@dataclass(frozen=True)
class DimensionResult:
    score: float
    description: str


@dataclass(frozen=True)
class CompatibilityResult:
    """Composite score, level and per-dimension breakdown for a pair of profiles."""
    user_id_a: str
    user_id_b: str
    composite_score: float
    level: str
    dimensions: Dict[str, DimensionResult] = field(default_factory=dict)

    def for_pair(self, user_id_a: str, user_id_b: str) -> "CompatibilityResult":
        """Relabel a symmetric result for the caller's query order."""
        if (user_id_a, user_id_b) == (self.user_id_a, self.user_id_b):
            return self
        return CompatibilityResult(
            user_id_a=user_id_a,
            user_id_b=user_id_b,
            composite_score=self.composite_score,
            level=self.level,
            dimensions=dict(self.dimensions),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompatibilityResult":
        return cls(
            user_id_a=data["user_id_a"],
            user_id_b=data["user_id_b"],
            composite_score=float(data["composite_score"]),
            level=data["level"],
            dimensions={
                name: DimensionResult(score=float(d["score"]), description=d["description"])
                for name, d in data["dimensions"].items()
            },
        )
