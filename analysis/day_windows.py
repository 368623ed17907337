"""Local-day window helpers for diurnal charts.

Diurnal charts compare the current local day against the previous one. This
module converts timestamps to local hours and computes the index bounds of
those two days, assuming a regular hourly series that ends at the present hour.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TypeVar
from zoneinfo import ZoneInfo

from .dto import DayWindows

HOURS_PER_DAY = 24

T = TypeVar("T")


def to_local(timestamp: datetime, timezone: str | ZoneInfo) -> datetime:
    """Convert a timestamp to local time in an IANA timezone.

    Naive timestamps are treated as UTC instants.
    """

    zone = timezone if isinstance(timezone, ZoneInfo) else ZoneInfo(timezone)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return timestamp.astimezone(zone)


def local_hours(timestamps: Sequence[datetime], timezone: str | ZoneInfo) -> list[int]:
    """Return the local hour-of-day (0-23) for each timestamp."""

    zone = timezone if isinstance(timezone, ZoneInfo) else ZoneInfo(timezone)
    return [to_local(ts, zone).hour for ts in timestamps]


def day_windows(hours: Sequence[int]) -> DayWindows:
    """Compute yesterday/today bounds from a series of local hours.

    Args:
        hours: Local hour-of-day per sample, oldest first.

    Returns:
        DayWindows where today covers the last `hours[-1] + 1` samples and
        yesterday covers the 24 samples before that. Starts that would fall
        before the beginning of the series are clamped to 0.
    """

    length = len(hours)
    if length == 0:
        return DayWindows(yesterday_start=0, yesterday_end=0, today_start=0, today_end=0)

    last_hour = hours[-1]
    today_start = max(length - 1 - last_hour, 0)
    yesterday_start = max(today_start - HOURS_PER_DAY, 0)
    return DayWindows(
        yesterday_start=yesterday_start,
        yesterday_end=today_start,
        today_start=today_start,
        today_end=length,
    )


def split_days(values: Sequence[T], windows: DayWindows) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """Slice a series into its (yesterday, today) parts."""

    yesterday = tuple(values[windows.yesterday_start : windows.yesterday_end])
    today = tuple(values[windows.today_start : windows.today_end])
    return yesterday, today
