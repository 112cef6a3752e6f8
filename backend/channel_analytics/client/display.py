import logging
from html import escape

from channel_analytics.client.charts import ChartBundle, render_charts
from channel_analytics.models.youtube import NOT_AVAILABLE, ChannelRecord
from channel_analytics.services.revenue import format_revenue

logger = logging.getLogger(__name__)


def render_analytics(record: ChannelRecord, revenue: float) -> str:
    """Render the analytics grid for one channel as an HTML fragment."""
    rows = [
        f"<div><strong>{escape(label)}:</strong> {escape(value)}</div>"
        for label, value in record.display_fields().items()
    ]

    if record.thumbnail_url:
        picture = f'<img src="{escape(record.thumbnail_url)}" alt="Profile Picture">'
    else:
        picture = NOT_AVAILABLE
    # Profile picture sits after the creation date.
    rows.insert(8, f"<div><strong>Profile Picture:</strong> {picture}</div>")

    rows.append(f'<div class="revenue-block">Total Revenue: {format_revenue(revenue)}</div>')
    return "\n".join(rows)


class DisplaySurface:
    """What the lookup writes to: the analytics grid, the charts and alerts."""

    def __init__(self):
        self.analytics_html = ""
        self.revenue_text = ""
        self.alerts: list[str] = []
        self.charts: ChartBundle | None = None

    def alert(self, message: str) -> None:
        logger.warning("Lookup failed: %s", message)
        self.alerts.append(message)

    def show_analytics(self, record: ChannelRecord, revenue: float) -> None:
        self.analytics_html = render_analytics(record, revenue)
        self.revenue_text = format_revenue(revenue)

    def render_charts(self) -> ChartBundle:
        self.charts = render_charts(self.charts)
        return self.charts
