"""
Application configuration using Pydantic Settings.
"""
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Dish Search API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database. DATABASE_URL wins over the individual DB_* parts when set.
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "restaurant_db"

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_CONNECT_TIMEOUT: int = 10
    DB_QUERY_TIMEOUT: int = 60

    # Run the seed check before serving requests
    AUTO_SEED: bool = True

    @field_validator("DB_POOL_SIZE", "DB_CONNECT_TIMEOUT", "DB_QUERY_TIMEOUT")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be a positive integer (got {v})")
        return v

    @property
    def database_url(self) -> URL:
        """Full SQLAlchemy URL for the target database."""
        if self.DATABASE_URL:
            url = make_url(self.DATABASE_URL)
            # A bare postgresql:// URL would pick whichever driver SQLAlchemy defaults to
            if url.drivername == "postgresql":
                url = url.set(drivername="postgresql+psycopg2")
            return url
        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
