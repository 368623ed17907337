"""Declarative diurnal chart configuration and drawing helpers.

Charts are emitted as Highcharts-shaped configuration dictionaries built from
a presentation variant, rather than by bespoke per-chart code. This package
contains the schema, variant definitions, input validation and the post-render
AQI category bar.
"""

from .diurnal import build_compact_config, build_full_config
from .stacked_bar import draw_category_bar

__all__ = ["build_compact_config", "build_full_config", "draw_category_bar"]
