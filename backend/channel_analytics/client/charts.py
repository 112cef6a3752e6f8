from dataclasses import dataclass, field

MONTHS = ["Jan", "Feb", "Mar"]


@dataclass
class Chart:
    canvas_id: str
    type: str
    label: str
    labels: list[str]
    data: list[float]
    disposed: bool = False

    def to_config(self) -> dict:
        """Chart.js-shaped config for the canvas this chart targets."""
        return {
            "type": self.type,
            "data": {
                "labels": list(self.labels),
                "datasets": [{"label": self.label, "data": list(self.data)}],
            },
        }

    def dispose(self) -> None:
        self.disposed = True


@dataclass
class ChartBundle:
    charts: dict[str, Chart] = field(default_factory=dict)

    def __getitem__(self, canvas_id: str) -> Chart:
        return self.charts[canvas_id]

    def __len__(self) -> int:
        return len(self.charts)

    def dispose(self) -> None:
        for chart in self.charts.values():
            chart.dispose()


def render_charts(previous: ChartBundle | None = None) -> ChartBundle:
    """Build the six dashboard charts, disposing any previously rendered bundle.

    The datasets are fixed illustrative values and do not reflect the
    looked-up channel.
    """
    if previous is not None:
        previous.dispose()

    charts = [
        Chart("subscriberChart", "line", "Subscribers", MONTHS, [100, 200, 300]),
        Chart("videoChart", "bar", "Videos", MONTHS, [5, 10, 15]),
        Chart("viewsChart", "pie", "Views", MONTHS, [1000, 2000, 3000]),
        Chart("revenueChart", "doughnut", "Revenue", MONTHS, [500, 1000, 1500]),
        Chart("engagementChart", "radar", "Engagement", ["Likes", "Comments", "Shares"], [50, 70, 30]),
        Chart("demographicsChart", "polarArea", "Demographics", ["Male", "Female", "Other"], [60, 30, 10]),
    ]
    return ChartBundle({chart.canvas_id: chart for chart in charts})
