from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Settings are read from .env
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = Field(default="Casa Luna")

    # Optional JSON file replacing the built-in high season periods
    high_season_path: str | None = Field(default=None)

    # One JSON line per computed quote
    quote_log_path: str = Field(default="data/quotes.log")
    log_level: str = Field(default="INFO")
