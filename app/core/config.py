"""
Configuration management for GameTracker API
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Service Config
    SERVICE_NAME: str = "gametracker-api"
    SERVICE_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = Field(default="development")
    PORT: int = 3000

    # CORS
    CORS_ORIGINS: list[str] = Field(default=["*"])

    # Database
    MONGODB_URL: str = Field(default="mongodb://localhost:27017")
    MONGODB_DATABASE: str = Field(default="gametracker")

    # Game defaults
    DEFAULT_COVER_IMAGE_URL: str = "https://via.placeholder.com/300x400?text=No+Cover"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


# Global settings instance
settings = Settings()
