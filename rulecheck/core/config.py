from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Validator defaults
    DEFAULT_SKIP_ON_EMPTY: bool = False  # Applied to rules that leave skip_on_empty unset

    class Config:
        env_file = ".env"
        env_prefix = "RULECHECK_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
