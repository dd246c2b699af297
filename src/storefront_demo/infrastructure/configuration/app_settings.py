from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    app_name: str = Field(default="Storefront Demo", alias="APP_NAME")
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    catalog_path: Path | None = Field(default=None, alias="CATALOG_PATH")
    price_comparison_url: str = Field(
        default="http://localhost:8000/api/compare-prices", alias="PRICE_COMPARISON_URL"
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
