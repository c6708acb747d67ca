from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.cache.compatibility_cache import CompatibilityCache
from core.config_loader import AppConfig
from core.profiles import ProfileProvider
from core.ranker import CandidateRanker, DiscoveryService
from core.scorer import CompatibilityScorer
from core.swipe import SwipeCoordinator, SwipeStore
from database.database import build_engine, build_session_factory
from database.profile_provider import SqlProfileProvider
from database.swipe_store import SqlSwipeStore


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Stores open a fresh unit of work per operation, so the context itself
    holds no Session and can be shared across request threads.
    """
    config: AppConfig
    engine: Engine
    session_factory: sessionmaker
    profiles: ProfileProvider
    swipe_store: SwipeStore
    scorer: CompatibilityScorer
    ranker: CandidateRanker
    discovery: DiscoveryService
    coordinator: SwipeCoordinator
    cache: Optional[CompatibilityCache] = None

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance
        """
        engine = build_engine(config.database.url, echo=config.database.echo)
        session_factory = build_session_factory(engine)

        profiles = SqlProfileProvider(session_factory)
        swipe_store = SqlSwipeStore(session_factory)

        # Cache (lazy - only if enabled)
        cache = None
        if config.cache.enabled:
            cache = CompatibilityCache.from_config(config.cache)

        matching = config.matching
        scorer = CompatibilityScorer(matching.scorer, cache=cache)
        ranker = CandidateRanker(profiles, scorer, matching.ranker)
        discovery = DiscoveryService(profiles, ranker, swipe_store)
        coordinator = SwipeCoordinator(
            swipe_store,
            profiles=profiles if matching.verify_profiles_on_swipe else None
        )

        return cls(
            config=config,
            engine=engine,
            session_factory=session_factory,
            profiles=profiles,
            swipe_store=swipe_store,
            scorer=scorer,
            ranker=ranker,
            discovery=discovery,
            coordinator=coordinator,
            cache=cache
        )
