"""
Configuration Management
Loads and validates environment variables
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        frozen=True,
    )
    BASE_URL: str = "http://localhost:8000"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # IMDb GraphQL (Top Picks persisted query)
    IMDB_GRAPHQL_URL: str = "https://api.graphql.imdb.com/"
    IMDB_LOCALE: str = "en-GB"
    IMDB_PAGE_SIZE: int = 48
    IMDB_TIMEOUT: float = 12.0  # seconds
    IMDB_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/123 Safari/537.36"
    )

    # Poster service used by the meta stub
    OMDB_API_KEY: str = "YOUR_OMDB_API_KEY"

    # Development
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"


settings = Settings()
