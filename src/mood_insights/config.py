"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Journal and insight settings loaded from environment."""

    # Storage
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    journal_filename: str = "journal.json"

    @property
    def journal_path(self) -> str:
        return os.path.join(self.data_path, self.journal_filename)

    # Dashboard window
    recent_window_days: int = 7
    include_future_entries: bool = False

    # History view
    top_activity_limit: int = 3
    default_language: str = "en"

    class Config:
        env_prefix = "INSIGHTS_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
