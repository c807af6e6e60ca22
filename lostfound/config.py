"""Lost & Found API: Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "postgresql+psycopg2://root:@localhost:5432/lost_found"
    CREATE_TABLES_ON_STARTUP: bool = True

    # Registration: email suffix decides the account role
    ADMIN_EMAIL_DOMAIN: str = "@cput.ac.za"
    USER_EMAIL_DOMAIN: str = "@mycput.ac.za"

    # Listings
    DEFAULT_LIST_LIMIT: int = 20

    # HTTP
    CORS_ORIGINS: list[str] = ["*"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
