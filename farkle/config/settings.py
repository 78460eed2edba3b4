"""
Farkle - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Game rules are fixed; only runtime behaviour is configurable.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from FARKLE_* environment variables."""

    # Application
    debug: bool = False
    log_level: str = "WARNING"

    # Dice
    seed: int | None = None

    # Console
    show_welcome: bool = True

    model_config = {
        "env_prefix": "FARKLE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug is on, otherwise the configured level."""
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
