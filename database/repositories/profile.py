from typing import List, Optional

from sqlalchemy import select

from database.models import Profile
from database.repositories.base import BaseRepository


class ProfileRepository(BaseRepository):
    def get_by_id(self, user_id: str) -> Optional[Profile]:
        stmt = select(Profile).where(Profile.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def exists(self, user_id: str) -> bool:
        stmt = select(Profile.id).where(Profile.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def list_ids(self) -> List[str]:
        stmt = select(Profile.id).order_by(Profile.id)
        return list(self.db.execute(stmt).scalars().all())
