# promptpress/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str = "promptpress"
    SERVICE_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    FRONTEND_ORIGIN: str | None = None
    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY
    BETTERSTACK_HOST: str = "https://in.logs.betterstack.com"  # PRODUCTION MODE ONLY

    RATE_LIMIT: str = "60/minute"
    MAX_TEXT_LENGTH: int = 100_000

    TOKEN_ENCODING: str = "o200k_base"  # tiktoken encoding used for counts

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
