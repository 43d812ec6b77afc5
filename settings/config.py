from pydantic_settings import BaseSettings
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    """Configuration settings for the application."""
    PROJECT_NAME: str = "Listed Vegan API"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    # only honoured with explicit origins, never with "*"
    CORS_ALLOW_CREDENTIALS: bool = False

    # "memory" keeps everything in process, "mongo" uses MONGO_URI/DB_NAME
    STORAGE_BACKEND: str = "memory"
    MONGO_URI: Optional[str] = None
    DB_NAME: Optional[str] = None

    SECRET_KEY: str = "MySecretKey@123"  # Production: load from env variables
    ALGORITHM: str = "HS256"
    ADMIN_TOKEN_EXPIRE_MINUTES: int = 60
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "Admin@123"
    SEED_SAMPLE_DATA: bool = True

    GIFT_CARD_MIN_AMOUNT: int = 10
    GIFT_CARD_MAX_AMOUNT: int = 1000
    GIFT_CARD_VALIDITY_DAYS: int = 365
    GIFT_CARD_CODE_LENGTH: int = 10
    GIFT_CARD_CODE_MAX_ATTEMPTS: int = 5

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
