from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # FastAPI
    API_VERSION: str = "v1"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # OpenAI
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TEMPERATURE: float = 0.7

    # Suggestions
    SUGGESTION_TIMEOUT_SECONDS: Optional[float] = 30.0

    class Config:
        env_file = ".env"


settings = Settings()
