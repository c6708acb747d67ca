import uuid

from sqlalchemy import Column, String, Boolean, TIMESTAMP, UniqueConstraint, Index

from .base import Base
from .profile import _utcnow


class Match(Base):
    """
    Mutual match between two users.

    The pair is stored in canonical order (user_id_low sorts before user_id_high) and
    is unique, so at most one match exists per unordered pair regardless
    of which side liked last. Matches are history and are never deleted.
    """
    __tablename__ = 'roommate_match'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id_low = Column(String(64), nullable=False)
    user_id_high = Column(String(64), nullable=False)
    matched_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint('user_id_low', 'user_id_high', name='uq_match_pair'),
        Index('idx_match_low', 'user_id_low'),
        Index('idx_match_high', 'user_id_high'),
        Index('idx_match_matched_at', 'matched_at'),
    )
