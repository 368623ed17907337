"""AQI category bar drawn onto an already-rendered chart.

This is not part of chart configuration: it needs pixel coordinates, which only
exist after the renderer has laid out the chart. Pixel y grows downward, so the
top of the plot area has the smallest y value.
"""

from __future__ import annotations

from typing import Final, Protocol

from analysis.categories import NAAQS
from analysis.thresholds import CATEGORY_COLORS, thresholds_for

# Upper value of the most severe segment; clipped to the visible axis.
HAZARDOUS_BAR_TOP: Final[float] = 5000


class ChartAxis(Protocol):
    """Axis of a rendered chart."""

    min: float
    max: float
    left: float

    def to_pixels(self, value: float) -> float:
        """Convert an axis value to a pixel coordinate."""


class RenderSurface(Protocol):
    """Rendered chart exposing its axes and a rectangle drawing primitive."""

    x_axis: ChartAxis
    y_axis: ChartAxis

    def rect(self, x: float, y: float, width: float, height: float, *, radius: float, fill: str, stroke: str) -> None:
        """Draw a rectangle whose top-left corner is at (x, y)."""


def draw_category_bar(surface: RenderSurface, width: float = 6, naaqs: NAAQS | str = NAAQS.PM25) -> None:
    """Draw a stacked bar of AQI category colors along the left of the plot.

    Args:
        surface: Already-rendered chart.
        width: Bar width in pixels.
        naaqs: Threshold set selector.

    Segments whose lower boundary lies at or above the top of the plot are
    skipped; the others are clipped to the top.
    """

    thresholds = thresholds_for(naaqs)
    y_axis = surface.y_axis
    top_px = y_axis.to_pixels(y_axis.max)
    x = surface.x_axis.left

    bounds = [*thresholds, HAZARDOUS_BAR_TOP]
    for index, color in enumerate(CATEGORY_COLORS):
        bottom_px = y_axis.to_pixels(bounds[index])
        if index > 0 and bottom_px <= top_px:
            continue
        upper_px = max(y_axis.to_pixels(bounds[index + 1]), top_px)
        surface.rect(
            x,
            upper_px,
            width,
            abs(bottom_px - upper_px),
            radius=1,
            fill=color,
            stroke="transparent",
        )
