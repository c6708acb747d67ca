"""ProfileProvider reading the profile table."""
from typing import List

from sqlalchemy.orm import sessionmaker

from core.errors import NotFound
from core.profiles import ProfileProvider
from core.scorer.models import ProfileSnapshot
from database.models import Profile
from database.uow import matching_uow


def to_snapshot(profile: Profile) -> ProfileSnapshot:
    return ProfileSnapshot.build(
        user_id=profile.id,
        age=profile.age,
        gender=profile.gender,
        university=profile.university,
        lifestyle=profile.lifestyle,
        interests=profile.interests,
        gender_preference=profile.gender_preference,
    )


class SqlProfileProvider(ProfileProvider):
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get_profile_snapshot(self, user_id: str) -> ProfileSnapshot:
        with matching_uow(self.session_factory) as repo:
            profile = repo.profiles.get_by_id(user_id)
            if profile is None:
                raise NotFound(user_id)
            return to_snapshot(profile)

    def profile_exists(self, user_id: str) -> bool:
        with matching_uow(self.session_factory) as repo:
            return repo.profiles.exists(user_id)

    def list_user_ids(self) -> List[str]:
        with matching_uow(self.session_factory) as repo:
            return repo.profiles.list_ids()
