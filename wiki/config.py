from functools import lru_cache
from pathlib import Path
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    # Application Configuration
    APP_NAME: str = "Wiki"
    APP_SUMMARY: str = "A minimal wiki serving file-backed text pages"
    WIKI_VERSION: str = "v0.1.x"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Storage Configuration
    PAGES_DIR: str = "."
    PAGE_FILE_MODE: int = 0o600

    # Presentation
    TEMPLATES_DIR: str = str(DEFAULT_TEMPLATES_DIR)

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("PAGE_FILE_MODE", mode="before")
    def parse_octal_mode(cls, v: Any):
        # Environment values are permission strings such as "600" or "0o600"
        if isinstance(v, str):
            return int(v.removeprefix("0o"), 8)
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
