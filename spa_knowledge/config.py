from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    KNOWLEDGE_REMOTE_URL: str = ""
    KNOWLEDGE_CACHE_TTL_SECONDS: float = 60.0
    KNOWLEDGE_FETCH_TIMEOUT_SECONDS: float = 3.0
    DB_URL: str = "sqlite:///./data/spa_knowledge.db"
    DATA_DIR: str = "./data"
    LOG_LEVEL: str = "INFO"
    cors_allow_origins: List[str] = ["*"]
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

settings = Settings()
