"""Configuration management using Pydantic Settings"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # External Services
    offer_source_base: str = "http://localhost:8001"
    lender_codes: List[str] = ["DBS", "OCBC", "SC", "UOB"]

    # Service
    service_name: str = "loan-compare"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
