#!/usr/bin/env python3
"""
Swipe Models - Data structures for swipe actions and matches.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Optional


class SwipeDecision(str, Enum):
    LIKE = "like"
    PASS = "pass"


class PairState(str, Enum):
    """State of an unordered pair in the swipe state machine."""
    NO_ACTION = "no_action"
    ONE_SIDED_LIKE = "one_sided_like"
    MATCHED = "matched"
    PASSED = "passed"  # one-sided or mutual pass


@dataclass(frozen=True)
class MatchRecord:
    """A persisted mutual match for a canonical (low, high) user pair."""
    match_id: str
    user_id_low: str
    user_id_high: str
    matched_at: datetime
    is_active: bool = True

    def other_user(self, user_id: str) -> str:
        return self.user_id_high if user_id == self.user_id_low else self.user_id_low


@dataclass(frozen=True)
class LikeResult:
    created: bool
    match_id: Optional[str] = None


@dataclass(frozen=True)
class PassResult:
    acknowledged: bool = True


@dataclass(frozen=True)
class PairStatus:
    state: PairState
    liked_by: FrozenSet[str] = field(default_factory=frozenset)
    match_id: Optional[str] = None
