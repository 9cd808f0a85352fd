"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., NEWS_API_KEY env var → Settings.NEWS_API_KEY)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Arrivals ────────────────────────────────────────────────
    # Each submitted cart arrives this many time units after the previous one
    ARRIVAL_GAP_MIN: int = 1
    ARRIVAL_GAP_MAX: int = 3

    # ── Playback ────────────────────────────────────────────────
    PLAYBACK_INTERVAL: float = 1.0     # seconds between auto-advance steps

    # ── News proxy ──────────────────────────────────────────────
    NEWS_API_URL: str = "https://newsapi.org/v2/everything"
    NEWS_API_KEY: str = ""
    NEWS_QUERY: str = "railway india"
    NEWS_PAGE_SIZE: int = 8
    NEWS_TIMEOUT: float = 10.0         # seconds

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    @property
    def arrival_gap(self) -> tuple[int, int]:
        return (self.ARRIVAL_GAP_MIN, self.ARRIVAL_GAP_MAX)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Module-level instance, shared by every import
settings = Settings()
