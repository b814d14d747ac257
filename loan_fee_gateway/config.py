"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-fee-gateway"
    log_level: str = "INFO"

    # Fee engine
    strict_bounds: bool = False  # Reject amounts outside 1000-20000 instead of clamping


settings = Settings()
