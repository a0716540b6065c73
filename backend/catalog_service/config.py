"""Application configuration and environment variables."""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

from catalog_service.core.utils import IdPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Catalog Service"
    version: str = "1.0.0"
    env: Literal["development", "production"] = "development"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # HTTP transport
    host: str = "0.0.0.0"
    port: int = 4000

    # GraphQL endpoints
    graphql_path: str = "/graphql"
    content_graphql_path: str = "/content/graphql"
    graphiql: bool = True
    introspection: bool = True

    # Logging
    log_level: str = "INFO"
    log_colors: bool = True

    # Stores
    id_policy: IdPolicy = "monotonic"
    seed_data: bool = True

    model_config = {
        "env_prefix": "CATALOG_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
