from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    HTTP_TIMEOUT: float = 30.0
    ENABLE_DEBUG_LOGGING: bool = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
