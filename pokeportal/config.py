# pokeportal/config.py

import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
# Useful for local development
env_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), '.env')
load_dotenv(dotenv_path=env_path)

class Settings(BaseSettings):
    """Application settings."""

    # PokeAPI base URL
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"

    # Per-request timeout in seconds; exceeding it surfaces as a connection error
    request_timeout_seconds: float = 60.0

    # Default cache TTL (Time To Live) in seconds (5 minutes)
    cache_ttl_seconds: int = 60 * 5

    # Share one network request between concurrent misses for the same key
    dedupe_inflight_requests: bool = True

    # Bulk list fetch parameters used when the caller gives none
    default_list_limit: int = 1000
    default_list_offset: int = 0

    log_level: str = "INFO"

    class Config:
        # Specifies the .env file encoding
        env_file_encoding = 'utf-8'


# Create a single instance of the settings to be imported in other modules
settings = Settings()
