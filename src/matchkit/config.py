"""Runtime configuration for matchkit."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchkitSettings(BaseSettings):
    """Settings shared by the matchers and the assertion layer.

    Environment variables are read with the ``MATCHKIT_`` prefix.

    Attributes
    ----------
    display_max_length
        Longest string rendered verbatim in failure messages (from
        ``MATCHKIT_DISPLAY_MAX_LENGTH``). Longer strings are cut and suffixed
        with ``...``. ``0`` disables truncation.
    log_outcomes
        Also log passing outcomes, not only failures (from
        ``MATCHKIT_LOG_OUTCOMES``).
    """

    display_max_length: int = Field(default=200, ge=0)
    log_outcomes: bool = False

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="MATCHKIT_",
    )


@lru_cache(maxsize=1)
def get_settings() -> MatchkitSettings:
    """Return the process-wide settings, loading them on first use."""
    return MatchkitSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
