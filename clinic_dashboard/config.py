#config.py
import os
import logging
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from typing import List
from functools import lru_cache

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
    # Application Settings
    APP_NAME: str = "Clinic Dashboard"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Data service settings
    HOST: str = "0.0.0.0"
    PORT: int = int(os.environ.get("PORT", 8000))
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///./clinic_dashboard.db")
    SEED_ON_STARTUP: bool = True

    # Dashboard client settings
    API_BASE_URL: str = os.environ.get("API_BASE_URL", "http://localhost:8000")
    REQUEST_TIMEOUT_SECONDS: float = 15.0

    # CSRF Settings (token is rendered into the page shell, echoed back in a header)
    CSRF_HEADER: str = "X-CSRF-TOKEN"
    CSRF_META_NAME: str = "csrf-token"
    CSRF_TOKEN: str = os.environ.get("CSRF_TOKEN", "change-me-in-prod")

    # CORS Settings (comma-separated)
    ALLOWED_ORIGINS: str = os.environ.get("ALLOWED_ORIGINS", "*")

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(s: Settings = None) -> None:
    s = s or get_settings()
    logging.basicConfig(
        level=getattr(logging, s.LOG_LEVEL.upper(), logging.INFO),
        format=s.LOG_FORMAT
    )


settings: Settings = get_settings()
