"""Sunrise/sunset helpers used for day/night chart shading."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime
from zoneinfo import ZoneInfo

from astral import Observer
from astral.sun import sunrise, sunset

from .day_windows import to_local
from .dto import Location, ShadingBounds

logger = logging.getLogger(__name__)


def fractional_hour(moment: datetime) -> float:
    """Return `hour + minute / 60` for a datetime, ignoring seconds."""

    return moment.hour + moment.minute / 60


def middle_timestamp(timestamps: Sequence[datetime]) -> datetime:
    """Return the timestamp at index `round(len / 2)`, rounding halves up.

    The index is clamped to the last element so one-sample series are usable.
    """

    if not timestamps:
        raise ValueError("timestamps must contain at least one value.")
    index = min((len(timestamps) + 1) // 2, len(timestamps) - 1)
    return timestamps[index]


def shading_bounds(*, day: date, location: Location) -> ShadingBounds | None:
    """Compute local sunrise/sunset hours for a location and local date.

    Args:
        day: Local calendar date.
        location: Coordinates and IANA timezone.

    Returns:
        ShadingBounds in local fractional hours, or None when the sun does not
        rise or set on that date (polar day/night).
    """

    zone = ZoneInfo(location.timezone)
    observer = Observer(latitude=location.latitude, longitude=location.longitude)
    try:
        rise = sunrise(observer, date=day, tzinfo=zone)
        fall = sunset(observer, date=day, tzinfo=zone)
    except ValueError as exc:
        logger.warning("No sunrise/sunset for %s on %s: %s", location.name, day.isoformat(), exc)
        return None
    return ShadingBounds(sunrise_hour=fractional_hour(rise), sunset_hour=fractional_hour(fall))


def shading_bounds_for_series(timestamps: Sequence[datetime], location: Location) -> ShadingBounds | None:
    """Compute shading bounds for the local date at the middle of a series."""

    if not timestamps:
        return None
    middle = to_local(middle_timestamp(timestamps), location.timezone)
    return shading_bounds(day=middle.date(), location=location)
