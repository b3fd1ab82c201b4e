"""
Application Configuration — Pydantic Settings

Centralized configuration management using environment variables.
Loads from .env file automatically with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Priority: Environment variables > .env file > defaults
    """

    # === API Configuration ===
    PROJECT_NAME: str = "World Events Monitor"

    # === CORS Configuration ===
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8000",
    ]

    # === Event Source ===
    EVENT_WINDOW_HOURS: float = 6.0  # Timestamps fall within this many hours before "now"

    # === Dashboard ===
    AUTO_REFRESH_INTERVAL_S: float = 30.0
    EVENTS_API_URL: str = ""  # Empty = call the app in-process
    REQUEST_TIMEOUT_S: float = 10.0

    # === Environment ===
    ENVIRONMENT: str = "local"  # local, development, staging, production
    LOG_LEVEL: str = "INFO"

    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_file=("backend/.env", ".env"),  # Check both paths
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Singleton instance
settings = Settings()
