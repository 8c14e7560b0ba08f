from functools import lru_cache

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    EXPENSES_API_URL: str = "http://localhost:8080"
    JWT_SECRET: str
    JWT_ALGO: str = "HS256"
    HTTP_TIMEOUT: float = 3.0
    LOG_LEVEL: str = "INFO"
    SNAPSHOT_CACHE_SIZE: int = 256

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
