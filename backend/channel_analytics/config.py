from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    api_key: str = Field(min_length=1)   # will read from .env, required
    youtube_api_base_url: str = "https://www.googleapis.com/youtube/v3"
    request_timeout: Optional[float] = None   # None waits on upstream indefinitely
    channel_parts: List[str] = ["snippet", "statistics", "status", "brandingSettings"]
    cors_origins: List[str] = ["*"]
    port: int = 3000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
