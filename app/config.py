"""Configuration settings for the application."""
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing. Not retryable."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Google Places API (New) credential, required at startup
    google_maps_api_key: Optional[str] = None
    places_api_base_url: str = "https://places.googleapis.com/v1"

    # FastAPI Configuration
    api_host: str = "0.0.0.0"
    port: int = 4000
    api_reload: bool = False

    # Public URL of this proxy, used to prefix relative photo paths
    api_base_url: str = "http://localhost:4000"

    # CORS Configuration
    cors_origins: List[str] = [
        "http://localhost:5173",  # Vite dev
        "http://127.0.0.1:5173",
        "http://localhost:3000",  # Docker frontend
        "http://127.0.0.1:3000",
    ]

    log_level: str = "INFO"

    # Environment
    environment: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = False

    def require_api_key(self) -> str:
        """Return the Places API key or fail fast."""
        if not self.google_maps_api_key:
            raise ConfigurationError("Missing GOOGLE_MAPS_API_KEY")
        return self.google_maps_api_key


@lru_cache()
def get_settings() -> Settings:
    return Settings()


# Global settings instance
settings = get_settings()
