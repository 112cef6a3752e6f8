import logging

import httpx

from channel_analytics.config import Settings
from channel_analytics.errors import NotFoundError, TransportError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)


class YouTubeDataClient:
    """Relay for the two YouTube Data API reads the lookup needs.

    The API key is attached here and nowhere else. Each call opens its own
    ``httpx.AsyncClient``; nothing is shared between requests.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = settings.youtube_api_base_url.rstrip("/")
        self.channel_parts = settings.channel_parts
        self._api_key = settings.api_key
        self._timeout = httpx.Timeout(settings.request_timeout)
        self._transport = transport

    async def search_channels(self, query: str | None) -> dict:
        """Search channels by free text. Returns the upstream payload unchanged."""
        query = (query or "").strip()
        if not query:
            raise ValidationError('Query parameter "q" is required')

        params = {"part": "snippet", "q": query, "type": "channel"}
        data = await self._get("/search", params)

        if not data.get("items"):
            raise NotFoundError("No channels found")
        return data

    async def get_channel(self, channel_id: str | None) -> dict:
        """Fetch snippet/statistics/status/branding parts for one channel id."""
        channel_id = (channel_id or "").strip()
        if not channel_id:
            raise ValidationError('Channel ID parameter "id" is required')

        params = {"part": ",".join(self.channel_parts), "id": channel_id}
        data = await self._get("/channels", params)

        if not data.get("items"):
            raise NotFoundError("Channel details not found")
        return data

    async def _get(self, path: str, params: dict) -> dict:
        url = f"{self.base_url}{path}"
        logger.info("Fetching data from YouTube API: %s %s", url, params)

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params={**params, "key": self._api_key})

            if not response.is_success:
                details = _error_details(response)
                logger.error("YouTube API Error (%s): %s", response.status_code, details)
                raise UpstreamError(response.status_code, details=details)

            data = response.json()
        except httpx.HTTPError as e:
            logger.exception("Error fetching data from YouTube API: %s", url)
            raise TransportError(str(e)) from e
        except ValueError as e:
            logger.exception("YouTube API returned a body that is not JSON: %s", url)
            raise TransportError(str(e)) from e

        if not isinstance(data, dict):
            raise TransportError("Unexpected YouTube API response shape")

        logger.debug("YouTube API Response: %s", data)
        return data


def _error_details(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return response.text
