"""Ranking Module - candidate ranking and discovery feeds."""
from core.ranker.service import CandidateRanker, RankedCandidate
from core.ranker.discovery import DiscoveryService

__all__ = ['CandidateRanker', 'RankedCandidate', 'DiscoveryService']
