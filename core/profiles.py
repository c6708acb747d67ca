"""
Profile Provider Interface - read-only source of profile snapshots.

Profile storage and validation belong to the profile subsystem; the matching
engine only reads immutable snapshots through this interface.
"""
from abc import ABC, abstractmethod
from typing import List

from core.scorer.models import ProfileSnapshot


class ProfileProvider(ABC):

    @abstractmethod
    def get_profile_snapshot(self, user_id: str) -> ProfileSnapshot:
        """
        Return the scoring snapshot for user_id.

        Raises:
            NotFound: if no profile exists for user_id
            Unavailable: if the profile store cannot be reached
        """
        pass

    @abstractmethod
    def profile_exists(self, user_id: str) -> bool:
        pass

    @abstractmethod
    def list_user_ids(self) -> List[str]:
        """All known user identifiers, used to build discovery pools."""
        pass
