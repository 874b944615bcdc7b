# content_rest/core/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "Content Item Data Service"
    API_PREFIX: str = "/content-service"

    # Directory holding one payload file per content item
    CONTENT_STORE_ROOT: str = "data/content"
    # Bytes per chunk when copying uploads and streaming downloads
    STREAM_CHUNK_SIZE: int = 64 * 1024

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields from .env

@lru_cache() # Cache the settings object for performance
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
