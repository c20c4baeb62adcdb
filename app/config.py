"""
Application configuration settings
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    APP_NAME: str = "Sales Analytics Service"
    LOG_LEVEL: str = "INFO"

    # Startup data: a JSON dataset wins over generated seed data
    SEED_ON_STARTUP: bool = True
    SEED: int = 42
    DATASET_PATH: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
