"""PM2.5 threshold lookups for chart coloring and axis scaling.

All helpers are pure and total over numeric input: there is no validation and
no failure path. Concentrations are in micrograms per cubic meter.
"""

from __future__ import annotations

import logging
from typing import Final, TypedDict

from .categories import NAAQS, AirQualityCategory

logger = logging.getLogger(__name__)


NAAQS_THRESHOLDS: Final[dict[NAAQS, tuple[float, ...]]] = {
    NAAQS.PM25: (0, 12, 35, 55, 150, 250),
    NAAQS.PM25_2024: (0, 9, 35, 55, 125, 225),
}

# Selector used when an identifier does not name a known standard.
FALLBACK_NAAQS: Final[NAAQS] = NAAQS.PM25_2024

CATEGORY_COLORS: Final[tuple[str, ...]] = (
    "rgb(0,255,0)",
    "rgb(255,255,0)",
    "rgb(255,126,0)",
    "rgb(255,0,0)",
    "rgb(143,63,151)",
    "rgb(126,0,35)",
)

# (breakpoint, ceiling) pairs; the first breakpoint >= the maximum wins.
Y_AXIS_LADDER: Final[tuple[tuple[float, float], ...]] = (
    (50, 50),
    (100, 100),
    (200, 200),
    (400, 500),
    (600, 600),
    (1000, 1000),
    (1500, 1500),
)
Y_AXIS_HEADROOM: Final[float] = 1.05


class ThresholdLine(TypedDict):
    """A Highcharts `yAxis.plotLines` entry."""

    color: str
    width: float
    value: float


def resolve_naaqs(naaqs: NAAQS | str | None) -> NAAQS:
    """Return the NAAQS member named by a selector.

    Args:
        naaqs: NAAQS member or its string value.

    Returns:
        The matching NAAQS, or FALLBACK_NAAQS for unknown or missing selectors.
    """

    if isinstance(naaqs, NAAQS):
        return naaqs
    try:
        return NAAQS(naaqs)
    except ValueError:
        logger.debug("Unknown NAAQS selector %r; using %s.", naaqs, FALLBACK_NAAQS.value)
        return FALLBACK_NAAQS


def thresholds_for(naaqs: NAAQS | str | None) -> tuple[float, ...]:
    """Return the six ascending category boundaries for a selector."""

    return NAAQS_THRESHOLDS[resolve_naaqs(naaqs)]


def classify(concentration: float, naaqs: NAAQS | str | None = NAAQS.PM25) -> AirQualityCategory:
    """Return the air quality category for a PM2.5 concentration.

    Args:
        concentration: PM2.5 value in ug/m3.
        naaqs: Threshold set selector.

    Returns:
        Category `k` such that `thresholds[k-1] < concentration <= thresholds[k]`.
        Values above the last boundary (and NaN) are HAZARDOUS.
    """

    thresholds = thresholds_for(naaqs)
    for index, upper in enumerate(thresholds[1:], start=1):
        if concentration <= upper:
            return AirQualityCategory(index)
    return AirQualityCategory.HAZARDOUS


def color_for(concentration: float, naaqs: NAAQS | str | None = NAAQS.PM25) -> str:
    """Return the AQI color associated with a PM2.5 concentration."""

    return CATEGORY_COLORS[classify(concentration, naaqs) - 1]


def y_axis_ceiling(max_concentration: float) -> float:
    """Return the y-axis maximum appropriate for a maximum PM2.5 level.

    A finite ladder of ceilings keeps the y-scale from jumping around as new
    data arrives.
    """

    for breakpoint, ceiling in Y_AXIS_LADDER:
        if max_concentration <= breakpoint:
            return ceiling
    return Y_AXIS_HEADROOM * max_concentration


def threshold_lines(width: float = 2, naaqs: NAAQS | str | None = NAAQS.PM25) -> list[ThresholdLine]:
    """Return colored AQI lines for a PM2.5 axis.

    Args:
        width: Line width in pixels.
        naaqs: Threshold set selector.

    Returns:
        Five lines, one per lower boundary of categories 2 through 6.
    """

    thresholds = thresholds_for(naaqs)
    return [
        {"color": CATEGORY_COLORS[index], "width": width, "value": thresholds[index]}
        for index in range(1, len(thresholds))
    ]
