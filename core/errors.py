#!/usr/bin/env python3
"""
Error taxonomy for the matching engine.

Scoring and ranking errors are reported per item where possible; swipe
errors always fail the whole call. Nothing here retries automatically.
"""

from typing import Optional


class MatchingError(Exception):
    """Base exception for matching engine errors."""
    pass


class NotFound(MatchingError):
    """Raised when a profile or pair cannot be resolved."""

    def __init__(self, user_id: str, message: Optional[str] = None):
        self.user_id = user_id
        super().__init__(message or f"Profile {user_id} not found")


class MissingAttribute(MatchingError):
    """Raised when a profile snapshot lacks a field required for scoring."""

    def __init__(self, user_id: str, attribute: str):
        self.user_id = user_id
        self.attribute = attribute
        super().__init__(f"Profile {user_id} is missing required attribute '{attribute}'")


class InvalidActor(MatchingError):
    """Raised when a user tries to swipe on themselves."""
    pass


class Conflict(MatchingError):
    """Raised when match creation hits a storage race it could not resolve."""
    pass


class Unavailable(MatchingError):
    """Raised when the store or a collaborator cannot be reached."""
    pass
