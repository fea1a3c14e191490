from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "SunscreenSanitizer"
    debug: bool = False
    log_level: str = "INFO"

    uv_filter_catalog_path: Optional[str] = None

    sunscreens_data_path: str = "data/sunscreens.json"
    sanitized_output_path: Optional[str] = None


settings = Settings()
