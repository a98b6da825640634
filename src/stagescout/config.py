"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Upstream sources
    listing_url: str = "https://playbill.com/shows/broadway"
    listing_origin: str = "https://www.playbill.com"
    reference_url: str = "https://en.wikipedia.org/wiki/Broadway_theatre"

    # Some upstreams reject default client identifiers
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )

    # Scraping settings
    scrape_timeout: int = 10

    # Cache settings
    cache_ttl_seconds: int = 60 * 60
    warm_cache: bool = True
    warm_interval_minutes: int = 60

    # Shown whenever a production has no poster of its own
    fallback_poster_url: str = (
        "https://upload.wikimedia.org/wikipedia/commons/e/eb/London_%2844761485915%29.jpg"
    )

    # Clock used for the previews badge
    timezone: str = "America/New_York"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]


# Global settings instance
settings = Settings()
