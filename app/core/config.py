import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    APP_NAME: str = "AgriMitra"
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
    MODEL_TEMPERATURE: float = 0.4
    MODEL_MAX_RETRIES: int = 0
    SAFETY_BLOCK_THRESHOLD: str = "BLOCK_LOW_AND_ABOVE"
    MAX_IMAGE_UPLOAD_BYTES: int = 5 * 1024 * 1024
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


settings = Settings()
