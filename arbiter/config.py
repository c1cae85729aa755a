"""Engine configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables.

    Every variable is prefixed with ``ARBITER_`` (e.g. ``ARBITER_RNG_SEED=42``).
    """

    model_config = SettingsConfigDict(
        env_prefix="ARBITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dice
    rng_seed: int | None = None  # None = seed from OS entropy

    # Rules
    proficiency_bonus: int = Field(default=2, ge=0)  # Flat bonus for new creatures
    base_save_dc: int = 8  # base + proficiency + ability modifier

    # Debug
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()
