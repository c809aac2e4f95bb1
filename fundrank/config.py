"""
FundRank settings

All settings can be overridden from a .env file or the environment.
Usage:
    from fundrank.config import settings
    limit = settings.SHORTLIST_LIMIT
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore variables not declared here
    )

    # === Environment ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === Shortlists ===
    SHORTLIST_LIMIT: int = 8
    CLUSTER_SIZE: int = 6
    MIN_CLUSTER_SIZE: int = 2

    # === API ===
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = ["*"]


# singleton
settings = Settings()
