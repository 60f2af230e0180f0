import yaml
import os
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class ScorerConfig(BaseModel):
    """
    Configuration for the compatibility scorer.

    Every point value used by the attribute scorers lives here so the
    scoring policy can be audited and overridden in one place.
    Penalties are stored as positive magnitudes and subtracted.
    """
    # Directional score range, always inside [0, 100]
    base_score: float = Field(50.0, ge=0, le=100)
    min_score: float = Field(0.0, ge=0, le=100)
    max_score: float = Field(100.0, ge=0, le=100)

    # Numeric range preferences (size, weight)
    numeric_in_range_bonus: float = Field(15.0, ge=0)
    numeric_out_of_range_penalty: float = Field(20.0, ge=0)
    # Decay window for one-sided (min-only / max-only) ranges, in attribute units
    numeric_one_sided_window: float = Field(5.0, gt=0)

    # Boolean exact-match preferences (has_stem, has_leaf, has_worm, has_chemicals)
    boolean_match_bonus: float = Field(15.0, ge=0)
    boolean_mismatch_penalty: float = Field(25.0, ge=0)

    # Enum membership preference (shine_factor)
    enum_match_bonus: float = Field(12.0, ge=0)
    enum_mismatch_penalty: float = Field(15.0, ge=0)

    @model_validator(mode="after")
    def _check_score_range(self) -> "ScorerConfig":
        if self.min_score > self.max_score:
            raise ValueError(
                f"min_score ({self.min_score}) must not exceed max_score ({self.max_score})"
            )
        return self


class RankingConfig(BaseModel):
    """Result truncation and candidate fan-out for ranking calls."""
    top_k: int = Field(5, ge=0)  # Maximum matches returned per seeker
    max_workers: int = Field(1, ge=1)  # 1 = score candidates on the calling thread


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_SCORER_CONFIG = ScorerConfig()


def load_config(config_path: Optional[str] = "config.yaml") -> AppConfig:
    data = {}
    explicit = config_path is not None and config_path != "config.yaml"

    if config_path is None:
        config_path = "config.yaml"

    # If not found at relative path (e.g. running from another directory), try the repo root
    if not os.path.exists(config_path):
        if explicit:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

    # Allow env var override for result count
    env_top_k = os.environ.get("MATCHMAKING_TOP_K")
    if env_top_k:
        if 'ranking' not in data or data['ranking'] is None:
            data['ranking'] = {}
        data['ranking']['top_k'] = int(env_top_k)

    # Allow env var override for worker pool size
    env_workers = os.environ.get("MATCHMAKING_MAX_WORKERS")
    if env_workers:
        if 'ranking' not in data or data['ranking'] is None:
            data['ranking'] = {}
        data['ranking']['max_workers'] = int(env_workers)

    # Allow env var override for log level
    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        if 'logging' not in data or data['logging'] is None:
            data['logging'] = {}
        data['logging']['level'] = env_log_level

    return AppConfig(**data)
