"""Built-in presentation definitions for diurnal charts."""

from __future__ import annotations

from typing import Final

from .schema import DiurnalPlotVariant, MarkerStyle, SeriesStyle


PLOT_BAND_COLOR: Final[str] = "rgb(0,0,0,0.1)"
GRID_COLOR: Final[str] = "#ddd"
MEAN_COLOR: Final[str] = "#aaa"
YESTERDAY_COLOR: Final[str] = "#888"
TODAY_COLOR: Final[str] = "#333"
Y_AXIS_TITLE: Final[str] = "PM2.5 (µg/m³)"
HOUR_TICK_INTERVAL: Final[int] = 3

MEAN_SERIES_NAME: Final[str] = "7 Day Mean"
YESTERDAY_SERIES_NAME: Final[str] = "Yesterday"
TODAY_SERIES_NAME: Final[str] = "Today"

# 18 reads "5pm" in the published charts; kept until product sign-off.
HOUR_LABELS: Final[dict[str, str]] = {
    "0": "Midnight",
    "3": "3am",
    "6": "6am",
    "9": "9am",
    "12": "Noon",
    "15": "3pm",
    "18": "5pm",
    "21": "9pm",
}


FULL_VARIANT: Final[DiurnalPlotVariant] = DiurnalPlotVariant(
    key="full",
    legend=True,
    axis_labels=True,
    gridlines=True,
    threshold_line_width=2,
    mean=SeriesStyle(
        line_width=10,
        marker=MarkerStyle(radius=1, symbol="square", fill_color="transparent"),
    ),
    yesterday=SeriesStyle(
        line_width=1,
        marker=MarkerStyle(radius=3, symbol="circle", line_width=1, outline_from_series=True),
    ),
    today=SeriesStyle(
        line_width=2,
        marker=MarkerStyle(radius=5, symbol="circle", line_width=1, outline_from_series=True),
    ),
)

COMPACT_VARIANT: Final[DiurnalPlotVariant] = DiurnalPlotVariant(
    key="compact",
    legend=False,
    axis_labels=False,
    gridlines=False,
    threshold_line_width=1,
    mean=SeriesStyle(line_width=5, marker=MarkerStyle(enabled=False)),
    yesterday=SeriesStyle(
        line_width=0.5,
        marker=MarkerStyle(radius=1.5, symbol="circle", line_width=0.3, outline_from_series=True),
    ),
    today=SeriesStyle(
        line_width=1,
        marker=MarkerStyle(radius=2, symbol="circle", line_width=0.5, outline_from_series=True),
    ),
    title_style={"color": "#333333", "fontSize": "12px"},
    animation=False,
)

VARIANTS: Final[dict[str, DiurnalPlotVariant]] = {
    FULL_VARIANT.key: FULL_VARIANT,
    COMPACT_VARIANT.key: COMPACT_VARIANT,
}
