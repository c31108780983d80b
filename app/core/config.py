from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL_GENERATE: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_GENERATE: float = 0.4

    JWT_SECRET: str | None = None
    SESSION_TOKEN_DAYS: int = 7
    SHARE_TOKEN_DAYS: int = 30

    STORAGE_URL: str | None = None
    STORAGE_KEY: str | None = None
    PHOTO_BUCKET: str = "memory-photos"
    PHOTO_CACHE_CONTROL: str = "3600"
    PHOTO_DIR: str = "./data/photos"
    PHOTO_BASE_URL: str = "http://localhost:8000/photos"
    PHOTO_MAX_BYTES: int = 5 * 1024 * 1024

    DATA_DIR: str = "./data/store"
    QUESTIONS_PER_MEMORY: int = 5
    DAILY_QUESTION_LIMIT: int = 5

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
