"""
Swipe Module - Like/Pass recording and mutual match creation.

Public API:
- SwipeCoordinator: Records swipes and creates matches exactly once per pair
- SwipeStore / InMemorySwipeStore: Persistence contract and process-local store
"""

from core.swipe.models import (
    LikeResult, MatchRecord, PairState, PairStatus, PassResult, SwipeDecision
)
from core.swipe.store import InMemorySwipeStore, SwipeStore
from core.swipe.coordinator import SwipeCoordinator

__all__ = [
    'SwipeCoordinator',
    'SwipeStore',
    'InMemorySwipeStore',
    'SwipeDecision',
    'PairState',
    'PairStatus',
    'MatchRecord',
    'LikeResult',
    'PassResult',
]
