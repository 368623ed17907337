"""Unit tests for the AQI category bar drawn onto a rendered chart."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from analysis.categories import NAAQS
from analysis.thresholds import CATEGORY_COLORS
from core.charting.stacked_bar import draw_category_bar

pytestmark = pytest.mark.unit

PLOT_TOP_PX = 10.0
PLOT_HEIGHT_PX = 100.0


@dataclass
class LinearAxis:
    """Axis mapping [min, max] onto a 100px plot whose top is at 10px."""

    min: float
    max: float
    left: float = 40.0

    def to_pixels(self, value: float) -> float:
        return PLOT_TOP_PX + PLOT_HEIGHT_PX * (1 - (value - self.min) / (self.max - self.min))


@dataclass
class RecordingSurface:
    """Render surface that records rectangle calls."""

    y_axis: LinearAxis
    x_axis: LinearAxis = field(default_factory=lambda: LinearAxis(min=0, max=24))
    rects: list[dict[str, object]] = field(default_factory=list)

    def rect(self, x: float, y: float, width: float, height: float, *, radius: float, fill: str, stroke: str) -> None:
        self.rects.append(
            {"x": x, "y": y, "width": width, "height": height, "radius": radius, "fill": fill, "stroke": stroke}
        )


def test_all_segments_drawn_when_axis_covers_hazardous() -> None:
    """A 500 ug/m3 axis shows all six categories, the last clipped to the top."""

    surface = RecordingSurface(y_axis=LinearAxis(min=0, max=500))
    draw_category_bar(surface)

    assert [r["fill"] for r in surface.rects] == list(CATEGORY_COLORS)
    assert all(r["x"] == 40.0 and r["width"] == 6 for r in surface.rects)
    assert all(r["stroke"] == "transparent" and r["radius"] == 1 for r in surface.rects)
    maroon = surface.rects[-1]
    assert maroon["y"] == pytest.approx(PLOT_TOP_PX)
    assert maroon["height"] == pytest.approx(50.0)


def test_segments_above_the_axis_are_skipped() -> None:
    """A 50 ug/m3 axis shows green, yellow and a clipped orange segment only."""

    surface = RecordingSurface(y_axis=LinearAxis(min=0, max=50))
    draw_category_bar(surface, width=8)

    assert [r["fill"] for r in surface.rects] == list(CATEGORY_COLORS[:3])
    green, yellow, orange = surface.rects
    assert green["y"] == pytest.approx(86.0)
    assert green["height"] == pytest.approx(24.0)
    assert yellow["y"] == pytest.approx(40.0)
    assert yellow["height"] == pytest.approx(46.0)
    assert orange["y"] == pytest.approx(PLOT_TOP_PX)
    assert orange["height"] == pytest.approx(30.0)
    assert {r["width"] for r in surface.rects} == {8}


def test_segments_follow_selected_standard() -> None:
    """The 2024 standard's lower Good boundary shortens the green segment."""

    surface = RecordingSurface(y_axis=LinearAxis(min=0, max=100))
    draw_category_bar(surface, naaqs=NAAQS.PM25_2024)

    assert surface.rects[0]["height"] == pytest.approx(9.0)
    assert [r["fill"] for r in surface.rects] == list(CATEGORY_COLORS[:4])


def test_green_segment_is_always_drawn() -> None:
    """Even an axis topping out inside Good draws one clipped green segment."""

    surface = RecordingSurface(y_axis=LinearAxis(min=0, max=5))
    draw_category_bar(surface)

    assert len(surface.rects) == 1
    assert surface.rects[0]["y"] == pytest.approx(PLOT_TOP_PX)
    assert surface.rects[0]["height"] == pytest.approx(PLOT_HEIGHT_PX)
