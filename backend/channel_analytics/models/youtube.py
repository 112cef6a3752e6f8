from typing import Any

from pydantic import BaseModel

NOT_AVAILABLE = "N/A"


class ErrorBody(BaseModel):
    error: str
    details: str | dict[str, Any] | None = None


class ChannelRecord(BaseModel):
    channel_id: str | None = None
    title: str | None = None
    description: str | None = None
    custom_url: str | None = None
    subscriber_count: str | None = None
    video_count: str | None = None
    view_count: str | None = None
    published_at: str | None = None
    thumbnail_url: str | None = None
    country: str | None = None
    is_linked: bool | None = None
    verified: bool | None = None
    uploads_playlist: str | None = None
    keywords: str | None = None

    @classmethod
    def from_item(cls, item: dict) -> "ChannelRecord":
        """Build a record from one item of a ``channels.list`` response."""
        snippet = item.get("snippet") or {}
        statistics = item.get("statistics") or {}
        status = item.get("status") or {}
        branding = (item.get("brandingSettings") or {}).get("channel") or {}
        related = (item.get("contentDetails") or {}).get("relatedPlaylists") or {}
        thumbnail = (snippet.get("thumbnails") or {}).get("default") or {}

        return cls(
            channel_id=item.get("id"),
            title=snippet.get("title"),
            description=snippet.get("description"),
            custom_url=snippet.get("customUrl") or branding.get("customUrl"),
            subscriber_count=_as_text(statistics.get("subscriberCount")),
            video_count=_as_text(statistics.get("videoCount")),
            view_count=_as_text(statistics.get("viewCount")),
            published_at=snippet.get("publishedAt"),
            thumbnail_url=thumbnail.get("url"),
            country=snippet.get("country"),
            is_linked=status.get("isLinked"),
            verified=status.get("verified"),
            uploads_playlist=related.get("uploads"),
            keywords=branding.get("keywords"),
        )

    @property
    def status_text(self) -> str:
        linked = "Active" if self.is_linked else "Inactive"
        verified = "Verified" if self.verified else "Not Verified"
        return f"{linked} | {verified}"

    def display_fields(self) -> dict[str, str]:
        """Ordered label -> text pairs, with "N/A" for absent values."""
        return {
            "Channel ID": self.channel_id or NOT_AVAILABLE,
            "Channel Title": self.title or NOT_AVAILABLE,
            "Description": self.description or NOT_AVAILABLE,
            "Custom URL": self.custom_url or NOT_AVAILABLE,
            "Subscribers": self.subscriber_count or NOT_AVAILABLE,
            "Video Count": self.video_count or NOT_AVAILABLE,
            "Views": self.view_count or NOT_AVAILABLE,
            "Creation Date": self.published_at or NOT_AVAILABLE,
            "Country": self.country or NOT_AVAILABLE,
            "Status": self.status_text,
            "Related Playlists": self.uploads_playlist or NOT_AVAILABLE,
            "Keywords": self.keywords or NOT_AVAILABLE,
        }


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
