from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "HR Desk"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Database
    database_url: str
    database_migrations_url: str | None = None  # Falls back to database_url
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_echo: bool = False  # Routes SQL statements to the sqlalchemy.engine logger

    # Listing
    default_page_limit: int = 10
    max_page_limit: int = 100  # Upper bound accepted by the HTTP layer

    # Reference data
    reference_data_writes: bool = False  # Enables POST /api/v1/ccnl

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("default_page_limit", "max_page_limit")
    @classmethod
    def validate_page_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Page limits must be at least 1")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
