import datetime

from sqlalchemy import Column, Text, String, Integer, TIMESTAMP, Index

from .base import Base


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class Profile(Base):
    """
    Roommate profile, owned by the profile subsystem.

    The matching engine only reads it to build scoring snapshots.
    Lifestyle and interests are comma-separated tag lists.
    """
    __tablename__ = 'profile'

    id = Column(String(64), primary_key=True)
    full_name = Column(Text, nullable=False, default='')
    age = Column(Integer, nullable=True)
    gender = Column(Text, nullable=True)
    gender_preference = Column(Text, nullable=True)
    university = Column(Text, nullable=True)
    bio = Column(Text, nullable=False, default='')
    lifestyle = Column(Text, nullable=False, default='')
    interests = Column(Text, nullable=False, default='')
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index('idx_profile_university', 'university'),
    )
