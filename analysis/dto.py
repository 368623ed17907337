"""DTO types consumed and produced by the diurnal analysis helpers.

DTOs are plain data containers. They are constructed fresh per chart and never
mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Location:
    """Monitoring location used for sun position and chart labels.

    Attributes:
        latitude: Decimal degrees, north positive.
        longitude: Decimal degrees, east positive.
        name: Display name used as the default chart title.
        timezone: IANA timezone identifier (e.g. "America/Los_Angeles").
    """

    latitude: float
    longitude: float
    name: str
    timezone: str


@dataclass(frozen=True)
class DiurnalPlotInput:
    """Inputs for a diurnal PM2.5 chart.

    Attributes:
        datetime: Hourly timestamps, ascending, ending at the present hour.
        pm25: Raw PM2.5 readings aligned to `datetime`.
        nowcast: Smoothed (NowCast) PM2.5 values aligned to `datetime`.
        hour_avg: 7-day hourly average, one value per local hour of day.
        location: Location the readings belong to.
        title: Optional title override; defaults to the location name.
    """

    datetime: tuple[datetime, ...]
    pm25: tuple[float | None, ...]
    nowcast: tuple[float | None, ...]
    hour_avg: tuple[float | None, ...]
    location: Location
    title: str | None = None

    @property
    def display_title(self) -> str:
        """Return the title to display on the chart."""

        return self.title if self.title is not None else self.location.name


@dataclass(frozen=True)
class DayWindows:
    """Index bounds of the "yesterday" and "today" slices of a series.

    All bounds are half-open `[start, end)` indices into the input series.
    """

    yesterday_start: int
    yesterday_end: int
    today_start: int
    today_end: int


@dataclass(frozen=True)
class ShadingBounds:
    """Local fractional hours of sunrise and sunset."""

    sunrise_hour: float
    sunset_hour: float


@dataclass(frozen=True)
class ColoredPoint:
    """A single series value with its AQI display color."""

    y: float | None
    color: str | None


@dataclass(frozen=True)
class DiurnalData:
    """Prepared series and axis values shared by all diurnal chart variants.

    Attributes:
        title: Chart title.
        hour_avg: 7-day hourly average reference series.
        yesterday: Colored points for the previous local day.
        today: Colored points for the current local day, up to the last sample.
        shading: Sunrise/sunset hours, or None when the sun does not rise or set.
        y_min: Lower y-axis bound.
        y_max: Upper y-axis bound from the ceiling ladder.
    """

    title: str
    hour_avg: tuple[float | None, ...]
    yesterday: tuple[ColoredPoint, ...]
    today: tuple[ColoredPoint, ...]
    shading: ShadingBounds | None
    y_min: float
    y_max: float
