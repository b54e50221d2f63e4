"""Pick one representative forecast entry per calendar day.

The provider delivers samples every 3 hours over 5 days. Midday samples
describe a day best, so the first pass keeps the first sample of each day
whose local hour falls in the noon window. When that does not cover enough
days (typically a partial first or last day), everything is discarded and
the first sample of each day is used instead.

Days are grouped by the observer's local date rather than the UTC date, so
the day boundary and the noon window use the same clock.
"""

from collections.abc import Iterable
from datetime import date, tzinfo

from ..models.weather import ForecastSample

NOON_WINDOW_START = 11
NOON_WINDOW_END = 14
DEFAULT_DAYS = 5


def _local_day(sample: ForecastSample, tz: tzinfo | None) -> tuple[date, int]:
    local = sample.timestamp.astimezone(tz)
    return local.date(), local.hour


def _noon_samples(
    samples: list[ForecastSample], tz: tzinfo | None
) -> list[ForecastSample]:
    selected: list[ForecastSample] = []
    seen: set[date] = set()
    for sample in samples:
        day, hour = _local_day(sample, tz)
        if day not in seen and NOON_WINDOW_START <= hour <= NOON_WINDOW_END:
            selected.append(sample)
            seen.add(day)
    return selected


def _first_of_day_samples(
    samples: list[ForecastSample], tz: tzinfo | None, days: int
) -> list[ForecastSample]:
    selected: list[ForecastSample] = []
    seen: set[date] = set()
    for sample in samples:
        day, _ = _local_day(sample, tz)
        if day in seen:
            continue
        selected.append(sample)
        seen.add(day)
        if len(selected) >= days:
            break
    return selected


def select_daily_forecasts(
    samples: Iterable[ForecastSample],
    tz: tzinfo | None = None,
    days: int = DEFAULT_DAYS,
) -> list[ForecastSample]:
    """Reduce chronologically ordered samples to at most `days` entries.

    Args:
        samples: Forecast samples in chronological order.
        tz: Observer time zone used for day boundaries and the noon window.
            None means the system local zone.
        days: Maximum number of days to return.

    Returns:
        One sample per calendar day, in order of first appearance.
    """
    samples = list(samples)
    selected = _noon_samples(samples, tz)
    if len(selected) >= days:
        return selected[:days]
    return _first_of_day_samples(samples, tz, days)
