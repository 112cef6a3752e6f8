import logging
from enum import Enum

import httpx
from pydantic import ValidationError as PydanticValidationError

from channel_analytics.client.display import DisplaySurface
from channel_analytics.models.youtube import ChannelRecord
from channel_analytics.services.revenue import estimate_revenue

logger = logging.getLogger(__name__)


class LookupState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    FETCHING_DETAILS = "fetching_details"
    RENDERED = "rendered"


class LookupFailed(Exception):
    pass


class ChannelLookup:
    """Drives search -> details -> render against the relay.

    ``http_client`` must have its base URL pointing at the relay. Failures
    are shown on the surface as a single alert and never raised.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        surface: DisplaySurface,
        search_path: str = "/api/search",
        channel_path: str = "/api/channel",
    ):
        self.http = http_client
        self.surface = surface
        self.search_path = search_path
        self.channel_path = channel_path
        self.state = LookupState.IDLE

    async def lookup(self, query: str) -> ChannelRecord | None:
        query = (query or "").strip()
        if not query:
            self.surface.alert("Please enter a channel name or URL.")
            return None

        try:
            self.state = LookupState.SEARCHING
            search_data = await self._fetch(self.search_path, {"q": query}, "No channels found")
            # Only the first match is used.
            channel_id = _first_item(search_data, self.search_path, _channel_id)

            self.state = LookupState.FETCHING_DETAILS
            channel_data = await self._fetch(self.channel_path, {"id": channel_id}, "Channel details not found")
            record = _first_item(channel_data, self.channel_path, ChannelRecord.from_item)
        except LookupFailed as e:
            self.state = LookupState.IDLE
            self.surface.alert(str(e))
            return None

        revenue = estimate_revenue(record.view_count, record.country)
        self.surface.show_analytics(record, revenue)
        self.surface.render_charts()
        self.state = LookupState.RENDERED
        return record

    async def _fetch(self, path: str, params: dict, empty_message: str) -> dict:
        logger.info("Fetching %s %s", path, params)
        try:
            response = await self.http.get(path, params=params)
        except httpx.HTTPError as e:
            logger.error("Relay request to %s failed: %s", path, e)
            raise LookupFailed(str(e) or "Network error") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            raise LookupFailed(_failure_message(data, response.status_code))
        if not isinstance(data, dict):
            raise LookupFailed(f"Unexpected response from {path}")
        if not data.get("items"):
            raise LookupFailed(empty_message)
        return data


def _channel_id(item: dict) -> str | None:
    return (item.get("id") or {}).get("channelId")


def _first_item(data: dict, path: str, parse):
    """Apply ``parse`` to the first item, turning malformed payloads into a failure."""
    try:
        return parse(data["items"][0])
    except (AttributeError, TypeError, KeyError, IndexError, PydanticValidationError) as e:
        logger.error("Malformed item from %s: %s", path, e)
        raise LookupFailed(f"Unexpected response from {path}") from e


def _failure_message(body, status_code: int) -> str:
    """Pick the most specific text from a relay error body."""
    if isinstance(body, dict):
        details = body.get("details")
        if isinstance(details, str) and details:
            return details
        if isinstance(details, dict):
            upstream = details.get("error")
            if isinstance(upstream, dict) and upstream.get("message"):
                return upstream["message"]
        if isinstance(body.get("error"), str) and body["error"]:
            return body["error"]
    return f"HTTP error! Status: {status_code}"
