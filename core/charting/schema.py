"""Schema types for declarative diurnal chart configuration.

Diurnal charts are described by two layers:

- `DiurnalPlotVariant`, a frozen set of presentation values (marker sizes,
  line widths, legend and label toggles) that distinguishes the full chart from
  the compact "small multiples" chart.
- `HighchartsConfig`, the nested dictionary handed to the renderer. Its field
  names are the wire contract of the renderer integration and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypedDict

from analysis.thresholds import ThresholdLine

MarkerSymbol = Literal["circle", "square"]


@dataclass(frozen=True, slots=True)
class MarkerStyle:
    """Point marker presentation for a series.

    Args:
        enabled: Whether markers are drawn at all.
        radius: Marker radius in pixels.
        symbol: Marker shape.
        line_width: Marker outline width.
        fill_color: Optional fill override (e.g. "transparent").
        outline_from_series: Use the series color as the marker outline color.
    """

    enabled: bool = True
    radius: float | None = None
    symbol: MarkerSymbol | None = None
    line_width: float | None = None
    fill_color: str | None = None
    outline_from_series: bool = False


@dataclass(frozen=True, slots=True)
class SeriesStyle:
    """Line and marker presentation for one series."""

    line_width: float
    marker: MarkerStyle


@dataclass(frozen=True, slots=True)
class DiurnalPlotVariant:
    """Presentation values for one diurnal chart variant.

    Args:
        key: Stable variant identifier.
        legend: Whether the legend is shown (at the top of the chart).
        axis_labels: Whether hour labels and the y-axis title are shown.
        gridlines: Whether dashed y gridlines and a plot border are drawn.
        animation: Whether the renderer animates the initial draw.
        threshold_line_width: Width of the AQI threshold plot lines.
        title_style: Optional title font style overrides.
        mean: Style of the 7-day hourly mean series.
        yesterday: Style of the yesterday series.
        today: Style of the today series.
    """

    key: str
    legend: bool
    axis_labels: bool
    gridlines: bool
    threshold_line_width: float
    mean: SeriesStyle
    yesterday: SeriesStyle
    today: SeriesStyle
    title_style: dict[str, str] | None = None
    animation: bool = True


class PointOptions(TypedDict):
    """A single series point with a per-point color override."""

    y: float | None
    color: str | None


class MarkerOptions(TypedDict, total=False):
    """Highcharts `series.marker` options."""

    enabled: bool
    radius: float
    symbol: str
    lineColor: str
    lineWidth: float
    fillColor: str


class SeriesOptions(TypedDict):
    """Highcharts line series definition."""

    name: str
    type: str
    data: list[float | None] | list[PointOptions]
    color: str
    lineWidth: float
    marker: MarkerOptions


# Shaded x-axis interval (night time). "from" is a Python keyword.
PlotBand = TypedDict("PlotBand", {"color": str, "from": float, "to": float})


class TitleOptions(TypedDict, total=False):
    """Chart or axis title."""

    text: str
    style: dict[str, str]


class XAxisLabelOptions(TypedDict, total=False):
    """x-axis label options."""

    enabled: bool
    hourLabels: dict[str, str]


class XAxisOptions(TypedDict, total=False):
    """Hour-of-day x-axis."""

    visible: bool
    tickInterval: int
    tickLength: int
    labels: XAxisLabelOptions
    plotBands: list[PlotBand]


class YAxisOptions(TypedDict, total=False):
    """PM2.5 y-axis."""

    min: float
    max: float
    gridLineColor: str
    gridLineDashStyle: str
    gridLineWidth: float
    title: TitleOptions
    plotLines: list[ThresholdLine]


class LegendOptions(TypedDict, total=False):
    """Legend toggle and placement."""

    enabled: bool
    verticalAlign: str


class HighchartsConfig(TypedDict):
    """Full chart configuration payload for the renderer."""

    accessibility: dict[str, bool]
    chart: dict[str, object]
    plotOptions: dict[str, dict[str, bool]]
    title: TitleOptions
    xAxis: XAxisOptions
    yAxis: YAxisOptions
    legend: LegendOptions
    series: list[SeriesOptions]
