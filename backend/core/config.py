from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Dictionary used for component lookups
    DICTIONARY_BACKEND: Literal["pymorphy", "file"] = "pymorphy"
    DICTIONARY_PATH: str | None = None  # form<TAB>lemma<TAB>tag file when backend is "file"

    # Lexical resources (dash prefixes, masters, slaves); packaged data when unset
    LEXICON_DIR: str | None = None

    # Compound debug logs
    DEBUG_COMPOUNDS: bool = False
    DEBUG_COMPOUNDS_DIR: str = "."

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
