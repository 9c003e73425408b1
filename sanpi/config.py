"""Application configuration via environment variables."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)

    app_port: int = Field(8000, alias="APP_PORT")
    listing_url: str = Field("https://www.gamesanpi.com/", alias="SANPI_LISTING_URL")
    article_base_url: str = Field("https://gamesanpi.com/news/", alias="SANPI_ARTICLE_BASE_URL")
    image_base_url: str = Field(
        "https://www.gamesanpi.com/images/articles", alias="SANPI_IMAGE_BASE_URL"
    )
    request_timeout_seconds: float = Field(20.0, alias="SANPI_REQUEST_TIMEOUT_SECONDS")
    user_agent: str = Field(
        "sanpi-illust/0.1 (+https://www.gamesanpi.com/)", alias="SANPI_USER_AGENT"
    )
    max_articles_to_check: int = Field(15, alias="SANPI_MAX_ARTICLES_TO_CHECK")
    illusts_per_article: int = Field(3, alias="SANPI_ILLUSTS_PER_ARTICLE")
    max_illustrations: int = Field(10, alias="SANPI_MAX_ILLUSTRATIONS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


def configure_logging(level: str) -> None:
    """Set up root logging once for the API and the CLI runner."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
