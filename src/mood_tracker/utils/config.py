"""Configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOOD_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Data storage
    data_dir: Path = Field(default=Path("data"))
    db_filename: str = Field(default="mood_tracker.json")

    # Reminders used until the user edits the set
    default_reminder_times: list[str] = Field(
        default_factory=lambda: ["09:00", "14:00", "19:00"]
    )

    # OneSignal push notifications (optional)
    onesignal_app_id: Optional[str] = None
    onesignal_api_key: Optional[str] = None
    onesignal_user_id: Optional[str] = None  # external_id alias of this device's user

    log_level: str = Field(default="INFO")

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_filename

    @property
    def has_notifications(self) -> bool:
        return all([
            self.onesignal_app_id,
            self.onesignal_api_key,
            self.onesignal_user_id,
        ])


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
