from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="NFTRARITY_")

    app_name: str = "NFT Rarity Inspector"
    debug: bool = False

    # Decimal places used when reporting rarity values
    display_precision: int = Field(default=4, ge=0)

    # Decimal places used when comparing totals for ties
    tie_precision: int = Field(default=9, ge=0)

    # Worker threads for scoring and catalog partitions for building
    # 1 = sequential
    scoring_workers: int = Field(default=1, ge=1)
    catalog_partitions: int = Field(default=1, ge=1)

    scoring_strategy: Literal["statistical", "trait_count", "combined"] = "statistical"


settings = Settings()


# =============================================================================
# FIXED LIMITS
# =============================================================================

# Largest collection accepted by the HTTP endpoint in a single request
MAX_ITEMS_PER_REQUEST = 50_000

# Pseudo-category used by the trait-count scoring strategy
TRAIT_COUNT_CATEGORY = "Trait Count"
