"""Pure analysis package for PM2.5 diurnal charts.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not draw anything or perform I/O.
"""

from .categories import NAAQS, AirQualityCategory
from .thresholds import classify, color_for, threshold_lines, y_axis_ceiling

__all__ = ["NAAQS", "AirQualityCategory", "classify", "color_for", "threshold_lines", "y_axis_ceiling"]
