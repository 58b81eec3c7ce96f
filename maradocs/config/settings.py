from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    maradocs_api_url: str = "https://api.maradocs.io/v1"
    maradocs_workspace_secret: str = ""

    request_timeout_seconds: int = 30
    poll_max_attempts: int = 120

    upload_chunk_size_bytes: int = 64 * 1024
    download_chunk_size_bytes: int = 64 * 1024
