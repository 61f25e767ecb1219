from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Interview-AI"
    APP_ADDRESS: str = "0.0.0.0"
    APP_PORT: int = 8000

    MISTRAL_API_KEY: str
    MISTRAL_MODEL: str = "mistral-large-latest"

    QUESTIONS_TEMPERATURE: float = 0.7
    QUESTIONS_MAX_TOKENS: int = 2000
    EXTRACTION_TEMPERATURE: float = 0.1
    EXTRACTION_MAX_TOKENS: int = 500
    ANALYSIS_TEMPERATURE: float = 0.3
    ANALYSIS_MAX_TOKENS: int = 1500

    LOG_DIR: str = "logs"
    SAVE_CALL_LOG: bool = False

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
