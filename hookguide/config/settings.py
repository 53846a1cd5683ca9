from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from HOOKGUIDE_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HOOKGUIDE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Application
    app_title: str = "Hook Guide Catalog API"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000


settings = Settings()
