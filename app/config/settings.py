"""
Application configuration with Pydantic Settings.
Reads environment variables from .env file.
"""
# pylint: disable=R0903

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FIXTURE = Path(__file__).resolve().parent.parent / "data" / "movies.json"


class Settings(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 1234

    # Comma-separated, parsed in a property
    accepted_origins_str: str = Field(
        "http://127.0.0.1:5500,http://localhost:5500,https://movies.com,https://midu.dev",
        validation_alias="accepted_origins",
    )

    movies_fixture: Path = DEFAULT_FIXTURE

    app_name: str = "Movies API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    @property
    def accepted_origins(self) -> list[str]:
        """Parse accepted CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.accepted_origins_str.split(",")
                if origin.strip()]


settings = Settings()
