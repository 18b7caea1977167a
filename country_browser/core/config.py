from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root and .env so it loads even if you start uvicorn from a subfolder
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    # Loads from OS environment first; .env is used for local dev
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    SERVICE_NAME: str = "Country Browser"
    LOG_LEVEL: str = "INFO"

    # REST Countries
    COUNTRIES_API_URL: str = "https://restcountries.com/v3.1/all"
    COUNTRY_FIELDS: List[str] = [
        "name",
        "region",
        "capital",
        "population",
        "flags",
        "cca3",
    ]
    # None disables the timeout entirely
    FETCH_TIMEOUT_SECONDS: Optional[float] = None

    AUTOLOAD: bool = True


settings = Settings()
