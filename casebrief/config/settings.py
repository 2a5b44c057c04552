from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    analysis_provider: str = "gemini"
    analysis_api_key: str = ""
    analysis_model_name: str = ""
    analysis_base_url: str = ""
    analysis_timeout_seconds: int = 60
    analysis_temperature: float = 0.0
    analysis_deadline_seconds: float | None = None

    example_delay_seconds: float = 0.0

    progress_interval_seconds: float = 0.05
    progress_step: int = 2
    progress_cap: int = 98

    max_upload_bytes: int = 10 * 1024 * 1024
    default_jurisdiction: str = "ontario"
