from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "LMA Lens"
    LOG_LEVEL: str = "INFO"
    MAX_CLAUSE_CHARS: int = 2000
    MIN_CLAUSE_CHARS: int = 10
    COMPACT_PREVIEW_CHARS: int = 100
    WORDS_PER_PAGE: int = 300

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> "Settings":
    return Settings()


settings = get_settings()
