from functools import lru_cache

from fastapi import Depends

from channel_analytics.config import Settings
from channel_analytics.services.youtube_api import YouTubeDataClient


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_youtube_client(settings: Settings = Depends(get_settings)) -> YouTubeDataClient:
    return YouTubeDataClient(settings)
