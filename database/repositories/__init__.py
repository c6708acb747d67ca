from database.repositories.base import BaseRepository
from database.repositories.profile import ProfileRepository
from database.repositories.swipe import SwipeRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'ProfileRepository',
    'SwipeRepository',
    'MatchRepository',
]
