from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MAGEDECK_")

    app_name: str = "MageDeck"
    debug: bool = False

    # Local project directory holding the catalog database
    project_dir: Path = Path.home() / ".magedeck"

    # Derived from project_dir when left empty
    database_url: str = ""

    # Seconds to wait for the database before giving up (fatal, no retry)
    db_timeout: float = 0.5

    scryfall_bulk_api: str = "https://api.scryfall.com/bulk-data"
    bulk_type: str = "oracle_cards"
    http_timeout: float = 300.0

    @model_validator(mode="after")
    def _derive_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = f"sqlite+aiosqlite:///{self.project_dir / 'magedeck.db'}"
        return self


settings = Settings()
