"""Diurnal PM2.5 chart configuration.

A diurnal chart plots PM2.5 against local hour of day: the 7-day hourly mean as
a wide reference line, yesterday and today as AQI-colored points, and night
time shaded using local sunrise/sunset.
"""

from __future__ import annotations

import logging

from analysis.categories import NAAQS
from analysis.day_windows import day_windows, local_hours, split_days
from analysis.dto import ColoredPoint, DiurnalData, DiurnalPlotInput, ShadingBounds
from analysis.sun import shading_bounds_for_series
from analysis.thresholds import color_for, threshold_lines, y_axis_ceiling

from .configs import (
    COMPACT_VARIANT,
    FULL_VARIANT,
    GRID_COLOR,
    HOUR_LABELS,
    HOUR_TICK_INTERVAL,
    MEAN_COLOR,
    MEAN_SERIES_NAME,
    PLOT_BAND_COLOR,
    TODAY_COLOR,
    TODAY_SERIES_NAME,
    Y_AXIS_TITLE,
    YESTERDAY_COLOR,
    YESTERDAY_SERIES_NAME,
)
from .schema import (
    DiurnalPlotVariant,
    HighchartsConfig,
    MarkerOptions,
    MarkerStyle,
    PlotBand,
    PointOptions,
    SeriesOptions,
    SeriesStyle,
    TitleOptions,
    XAxisOptions,
    YAxisOptions,
)
from .validator import validate_diurnal_input

logger = logging.getLogger(__name__)


def prepare_diurnal_data(data: DiurnalPlotInput, *, naaqs: NAAQS | str = NAAQS.PM25) -> DiurnalData:
    """Derive the windows, colors and axis range shared by all variants.

    Args:
        data: Hourly series and location.
        naaqs: Threshold set used for point colors.

    Returns:
        DiurnalData ready to be assembled into a chart configuration.
    """

    result = validate_diurnal_input(data)
    for message in (*result.errors, *result.warnings):
        logger.warning("Diurnal input for %s: %s", data.location.name, message)

    windows = day_windows(local_hours(data.datetime, data.location.timezone))
    yesterday, today = split_days(data.nowcast, windows)

    present = [v for v in (*data.hour_avg, *yesterday, *today) if v is not None]
    y_max = y_axis_ceiling(max(present, default=0))

    return DiurnalData(
        title=data.display_title,
        hour_avg=tuple(data.hour_avg),
        yesterday=colored_points(yesterday, naaqs=naaqs),
        today=colored_points(today, naaqs=naaqs),
        shading=shading_bounds_for_series(data.datetime, data.location),
        y_min=0,
        y_max=y_max,
    )


def colored_points(values: tuple[float | None, ...], *, naaqs: NAAQS | str = NAAQS.PM25) -> tuple[ColoredPoint, ...]:
    """Attach an AQI color to every value; missing values get no color."""

    return tuple(ColoredPoint(y=v, color=color_for(v, naaqs) if v is not None else None) for v in values)


def format_hour_label(value: float | str) -> str:
    """Return the x-axis tick label for an hour-of-day tick value."""

    label = f"{value:g}" if isinstance(value, (int, float)) else str(value)
    return HOUR_LABELS.get(label, label)


def build_full_config(data: DiurnalPlotInput, *, naaqs: NAAQS | str = NAAQS.PM25) -> HighchartsConfig:
    """Return the full diurnal chart configuration (legend, labels, gridlines)."""

    return build_config(data, variant=FULL_VARIANT, naaqs=naaqs)


def build_compact_config(data: DiurnalPlotInput, *, naaqs: NAAQS | str = NAAQS.PM25) -> HighchartsConfig:
    """Return the compact "small multiples" configuration.

    The compact chart has no legend or axis labeling; series data and colors
    match the full chart exactly.
    """

    return build_config(data, variant=COMPACT_VARIANT, naaqs=naaqs)


def build_config(
    data: DiurnalPlotInput,
    *,
    variant: DiurnalPlotVariant,
    naaqs: NAAQS | str = NAAQS.PM25,
) -> HighchartsConfig:
    """Build a diurnal chart configuration for a presentation variant.

    Args:
        data: Hourly series and location.
        variant: Presentation values (see `core.charting.configs`).
        naaqs: Threshold set used for point colors and threshold lines.

    Returns:
        HighchartsConfig for the renderer.
    """

    prepared = prepare_diurnal_data(data, naaqs=naaqs)
    return assemble_config(prepared, variant=variant, naaqs=naaqs)


def assemble_config(
    prepared: DiurnalData,
    *,
    variant: DiurnalPlotVariant,
    naaqs: NAAQS | str = NAAQS.PM25,
) -> HighchartsConfig:
    """Assemble a HighchartsConfig from prepared data and a variant."""

    chart: dict[str, object] = {}
    if variant.gridlines:
        chart.update(plotBorderColor=GRID_COLOR, plotBorderWidth=1)
    if not variant.animation:
        chart["animation"] = False

    title: TitleOptions = {"text": prepared.title}
    if variant.title_style is not None:
        title["style"] = dict(variant.title_style)

    return {
        "accessibility": {"enabled": False},
        "chart": chart,
        "plotOptions": {"line": {"animation": False}},
        "title": title,
        "xAxis": _x_axis(prepared.shading, variant=variant),
        "yAxis": _y_axis(prepared, variant=variant, naaqs=naaqs),
        "legend": {"enabled": True, "verticalAlign": "top"} if variant.legend else {"enabled": False},
        "series": [
            _series(MEAN_SERIES_NAME, list(prepared.hour_avg), color=MEAN_COLOR, style=variant.mean),
            _series(
                YESTERDAY_SERIES_NAME,
                _point_options(prepared.yesterday),
                color=YESTERDAY_COLOR,
                style=variant.yesterday,
            ),
            _series(TODAY_SERIES_NAME, _point_options(prepared.today), color=TODAY_COLOR, style=variant.today),
        ],
    }


def plot_bands(shading: ShadingBounds | None) -> list[PlotBand]:
    """Return night-time x-axis bands: midnight to sunrise, sunset to midnight."""

    if shading is None:
        return []
    return [
        {"color": PLOT_BAND_COLOR, "from": 0, "to": shading.sunrise_hour},
        {"color": PLOT_BAND_COLOR, "from": shading.sunset_hour, "to": 24},
    ]


def _x_axis(shading: ShadingBounds | None, *, variant: DiurnalPlotVariant) -> XAxisOptions:
    """Build the hour-of-day axis."""

    if variant.axis_labels:
        return {
            "tickInterval": HOUR_TICK_INTERVAL,
            "labels": {"hourLabels": dict(HOUR_LABELS)},
            "plotBands": plot_bands(shading),
        }
    return {
        "visible": True,
        "tickLength": 0,
        "labels": {"enabled": False},
        "plotBands": plot_bands(shading),
    }


def _y_axis(prepared: DiurnalData, *, variant: DiurnalPlotVariant, naaqs: NAAQS | str) -> YAxisOptions:
    """Build the PM2.5 axis with AQI threshold lines."""

    axis: YAxisOptions = {"min": prepared.y_min, "max": prepared.y_max}
    if variant.gridlines:
        axis.update(gridLineColor=GRID_COLOR, gridLineDashStyle="Dash", gridLineWidth=1)
    axis["title"] = {"text": Y_AXIS_TITLE if variant.axis_labels else ""}
    axis["plotLines"] = threshold_lines(variant.threshold_line_width, naaqs)
    return axis


def _point_options(points: tuple[ColoredPoint, ...]) -> list[PointOptions]:
    """Convert colored points into per-point series options."""

    return [{"y": point.y, "color": point.color} for point in points]


def _series(
    name: str,
    data: list[float | None] | list[PointOptions],
    *,
    color: str,
    style: SeriesStyle,
) -> SeriesOptions:
    """Build a line series dict with consistent styling."""

    return {
        "name": name,
        "type": "line",
        "data": data,
        "color": color,
        "lineWidth": style.line_width,
        "marker": _marker(style.marker, series_color=color),
    }


def _marker(marker: MarkerStyle, *, series_color: str) -> MarkerOptions:
    """Convert a MarkerStyle into Highcharts marker options."""

    if not marker.enabled:
        return {"enabled": False}

    options: MarkerOptions = {}
    if marker.radius is not None:
        options["radius"] = marker.radius
    if marker.symbol is not None:
        options["symbol"] = marker.symbol
    if marker.outline_from_series:
        options["lineColor"] = series_color
    if marker.line_width is not None:
        options["lineWidth"] = marker.line_width
    if marker.fill_color is not None:
        options["fillColor"] = marker.fill_color
    return options
