import os

os.environ.setdefault("API_KEY", "test-api-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from channel_analytics.config import Settings
from channel_analytics.dependencies import get_settings, get_youtube_client
from channel_analytics.main import app
from channel_analytics.services.youtube_api import YouTubeDataClient

TEST_API_KEY = "test-api-key"
TEST_CHANNEL_ID = "UC123"


def make_settings(**overrides) -> Settings:
    values = {"api_key": TEST_API_KEY}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_search_payload(*channel_ids: str) -> dict:
    """Shape of a ``search.list`` response restricted to channels."""
    return {
        "kind": "youtube#searchListResponse",
        "items": [
            {
                "kind": "youtube#searchResult",
                "id": {"kind": "youtube#channel", "channelId": channel_id},
                "snippet": {"channelId": channel_id, "title": f"Channel {channel_id}"},
            }
            for channel_id in channel_ids
        ],
    }


def make_channel_item(
    channel_id: str = TEST_CHANNEL_ID,
    *,
    view_count: str | None = "1000000",
    country: str | None = "US",
    description: str | None = "A channel about tests",
) -> dict:
    snippet = {
        "title": "TestChannel",
        "customUrl": "@testchannel",
        "publishedAt": "2015-06-01T00:00:00Z",
        "thumbnails": {"default": {"url": "https://yt3.ggpht.com/test.jpg"}},
    }
    if description is not None:
        snippet["description"] = description
    if country is not None:
        snippet["country"] = country

    statistics = {"subscriberCount": "5000", "videoCount": "42"}
    if view_count is not None:
        statistics["viewCount"] = view_count

    return {
        "kind": "youtube#channel",
        "id": channel_id,
        "snippet": snippet,
        "statistics": statistics,
        "status": {"isLinked": True, "privacyStatus": "public"},
        "brandingSettings": {"channel": {"keywords": "testing python"}},
    }


def make_channel_payload(*items: dict) -> dict:
    return {"kind": "youtube#channelListResponse", "items": list(items)}


class FakeYouTube:
    """Stands in for the YouTube Data API behind an ``httpx.MockTransport``.

    Responses are keyed by endpoint (``search`` or ``channels``); every
    request received is recorded in ``requests``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, httpx.Response] = {}
        self.raise_error: Exception | None = None

    def respond(self, endpoint: str, status_code: int = 200, json=None, text: str | None = None):
        if text is not None:
            self.responses[endpoint] = httpx.Response(status_code, text=text)
        else:
            self.responses[endpoint] = httpx.Response(status_code, json=json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        endpoint = request.url.path.rsplit("/", 1)[-1]
        return self.responses.get(endpoint, httpx.Response(404, json={"error": {"message": "unmocked"}}))

    def client(self) -> YouTubeDataClient:
        return YouTubeDataClient(make_settings(), transport=httpx.MockTransport(self.handler))


@pytest.fixture
def youtube() -> FakeYouTube:
    return FakeYouTube()


@pytest.fixture
def client(youtube):
    """Relay test client whose upstream calls go to the FakeYouTube."""
    app.dependency_overrides[get_settings] = lambda: make_settings()
    app.dependency_overrides[get_youtube_client] = youtube.client
    yield TestClient(app)
    app.dependency_overrides.clear()
