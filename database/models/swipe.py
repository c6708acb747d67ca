import uuid

from sqlalchemy import Column, String, TIMESTAMP, UniqueConstraint, Index

from .base import Base
from .profile import _utcnow


class SwipeAction(Base):
    """
    Current decision per directed (actor, target) edge.

    Last write wins: a later Like/Pass from the same actor toward the same
    target updates this row instead of adding another.
    """
    __tablename__ = 'swipe_action'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    actor_id = Column(String(64), nullable=False)
    target_id = Column(String(64), nullable=False)
    decision = Column(String(8), nullable=False)  # like|pass
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        UniqueConstraint('actor_id', 'target_id', name='uq_swipe_action_actor_target'),
        Index('idx_swipe_action_actor', 'actor_id'),
    )


class SwipeEvent(Base):
    """
    Append-only audit log of decision changes.
    """
    __tablename__ = 'swipe_event'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    actor_id = Column(String(64), nullable=False)
    target_id = Column(String(64), nullable=False)
    decision = Column(String(8), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index('idx_swipe_event_edge', 'actor_id', 'target_id'),
    )
