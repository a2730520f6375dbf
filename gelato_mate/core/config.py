from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "prod"
    log_level: str = "INFO"

    # Defaults for envelopes built through Envelope.success() / failure()
    success_code: int = 200
    success_message: str = "success"
    failure_code: int = 500
    failure_message: str = "failure"

    model_config = SettingsConfigDict(
        env_prefix="GELATO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings()
