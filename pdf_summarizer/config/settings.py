from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "pdf_summaries"
    db_username: str = "pdf_summaries"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    pdf_engine: str = "pdfplumber"

    download_timeout_seconds: int = 30
    max_download_bytes: int = 32 * 1024 * 1024

    summarization_provider: str = "openai"
    summarization_api_key: str = ""
    summarization_model_name: str = "gpt-4o-mini"
    summarization_base_url: str | None = None
    summarization_timeout_seconds: int = 60
    summarization_temperature: float = 0.3

    # A ceiling of 0 denies every run
    quota_max_runs: int = 5
    quota_window_seconds: PositiveInt = 86400
