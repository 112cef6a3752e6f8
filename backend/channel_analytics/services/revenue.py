from types import MappingProxyType

# Revenue per thousand views, by snippet.country code.
RPM_RATES = MappingProxyType({
    "US": 7.53,
    "UK": 5.62,
    "NZ": 5.56,
    "AE": 2.33,
    "PK": 2.5,
    "IN": 2.5,
})
DEFAULT_RPM = 2.5


def rpm_for(country: str | None) -> float:
    return RPM_RATES.get(country or "", DEFAULT_RPM)


def parse_views(views: int | str | None) -> int:
    """Coerce the upstream view count (a numeric string) to an int, 0 when unusable."""
    if views is None:
        return 0
    try:
        return max(int(views), 0)
    except (TypeError, ValueError):
        return 0


def estimate_revenue(views: int | str | None, country: str | None) -> float:
    return parse_views(views) * rpm_for(country) / 1000


def format_revenue(revenue: float) -> str:
    return f"${revenue:.2f}"
