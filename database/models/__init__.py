from .base import Base
from .profile import Profile
from .swipe import SwipeAction, SwipeEvent
from .match import Match

__all__ = [
    'Base',
    'Profile',
    'SwipeAction',
    'SwipeEvent',
    'Match',
]
