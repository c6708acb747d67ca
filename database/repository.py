from sqlalchemy.orm import Session

from database.repositories import MatchRepository, ProfileRepository, SwipeRepository


class MatchingRepository:
    """Repositories for one unit of work, all bound to the same Session."""

    def __init__(self, db: Session):
        self.db = db
        self.profiles = ProfileRepository(db)
        self.swipes = SwipeRepository(db)
        self.matches = MatchRepository(db)

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
