from fastapi import APIRouter, Depends, Query

from channel_analytics.dependencies import get_youtube_client
from channel_analytics.models.youtube import ErrorBody
from channel_analytics.services.youtube_api import YouTubeDataClient

router = APIRouter(prefix="/api", tags=["relay"])

_error_responses = {
    400: {"model": ErrorBody},
    404: {"model": ErrorBody},
    500: {"model": ErrorBody},
}


@router.get("/search", responses=_error_responses)
async def search(
    q: str = Query(None, description="Channel name or URL fragment"),
    youtube: YouTubeDataClient = Depends(get_youtube_client),
):
    return await youtube.search_channels(q)


@router.get("/channel", responses=_error_responses)
async def channel_details(
    channel_id: str = Query(None, alias="id", description="Channel ID from a search result"),
    youtube: YouTubeDataClient = Depends(get_youtube_client),
):
    return await youtube.get_channel(channel_id)
