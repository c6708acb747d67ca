import yaml
import os
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class DatabaseConfig(BaseModel):
    url: str
    echo: bool = False


class CacheConfig(BaseModel):
    """Redis cache for compatibility results."""
    enabled: bool = False
    redis_url: str = "redis://localhost:6379/0"
    password: Optional[str] = None
    ttl_seconds: int = 24 * 60 * 60
    key_prefix: str = "compat"


class DimensionWeights(BaseModel):
    """Weights for each dimension in the composite score. Must sum to 1.0."""
    age: float = 0.20
    gender: float = 0.15
    university: float = 0.25
    lifestyle: float = 0.25
    interests: float = 0.15

    @model_validator(mode="after")
    def _check_weights(self) -> "DimensionWeights":
        values = self.model_dump()
        negative = [name for name, weight in values.items() if weight < 0]
        if negative:
            raise ValueError(f"Dimension weights must be non-negative: {negative}")
        total = sum(values.values())
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Dimension weights must sum to 1.0, got {total:.6f}")
        return self


class LevelThreshold(BaseModel):
    min_score: float
    label: str


DEFAULT_LEVELS = [
    LevelThreshold(min_score=0.85, label="Excellent Match"),
    LevelThreshold(min_score=0.70, label="Very Good Match"),
    LevelThreshold(min_score=0.55, label="Good Match"),
    LevelThreshold(min_score=0.40, label="Moderate Match"),
    LevelThreshold(min_score=0.0, label="Low Compatibility"),
]


class ScorerConfig(BaseModel):
    """
    Configuration for the CompatibilityScorer.

    All scores are on a 0.0-1.0 scale.
    """
    weights: DimensionWeights = Field(default_factory=DimensionWeights)

    # Age: linear decay over max_spread years, floored at age_min_score
    age_max_spread: int = 10
    age_min_score: float = 0.1

    # Gender: open preferences with different genders, and unmet preferences
    gender_open_score: float = 0.6
    gender_mismatch_score: float = 0.0

    university_mismatch_score: float = 0.4

    # Lifestyle/interests when either side has no tags
    neutral_score: float = 0.5

    levels: List[LevelThreshold] = Field(default_factory=lambda: list(DEFAULT_LEVELS))

    @field_validator("age_max_spread")
    @classmethod
    def _positive_spread(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("age_max_spread must be positive")
        return value

    @field_validator("levels")
    @classmethod
    def _check_levels(cls, levels: List[LevelThreshold]) -> List[LevelThreshold]:
        if not levels:
            raise ValueError("At least one compatibility level is required")
        thresholds = [level.min_score for level in levels]
        if any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("Level thresholds must be strictly descending")
        if thresholds[-1] != 0.0:
            raise ValueError("The lowest level threshold must be 0.0")
        return levels


class RankerConfig(BaseModel):
    default_limit: int = 20
    max_limit: int = 100


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    ranker: RankerConfig = Field(default_factory=RankerConfig)
    # Reject likes/passes toward users the profile store does not know
    verify_profiles_on_swipe: bool = True


class AppConfig(BaseModel):
    database: DatabaseConfig
    cache: CacheConfig = Field(default_factory=CacheConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        data.setdefault('database', {})
        data['database']['url'] = env_db_url

    # Allow env var override for Redis URL
    env_redis_url = os.environ.get("REDIS_URL")
    if env_redis_url:
        if data.get('cache') is None:
            data['cache'] = {}
        data['cache']['redis_url'] = env_redis_url

    return AppConfig(**data)
