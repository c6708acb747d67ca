#!/usr/bin/env python3
"""
Scoring Module - Roommate compatibility scoring.

Public API:
- CompatibilityScorer: Scores a pair of profile snapshots
- ProfileSnapshot: Immutable scoring view of a profile
- CompatibilityResult: Composite score, level and per-dimension breakdown

Modules:
- models.py: Data structures (ProfileSnapshot, CompatibilityResult)
- dimensions.py: Per-dimension strategies and description tables
- service.py: CompatibilityScorer orchestrator
"""

from core.scorer.models import CompatibilityResult, DimensionResult, ProfileSnapshot
from core.scorer.service import CompatibilityScorer

__all__ = ['CompatibilityScorer', 'CompatibilityResult', 'DimensionResult', 'ProfileSnapshot']
