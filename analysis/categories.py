"""Shared air quality category definitions.

AirQualityCategory is the ordinal health classification used by every chart
color and threshold line. NAAQS selects which set of PM2.5 breakpoints is used
to derive it.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class NAAQS(StrEnum):
    """National Ambient Air Quality Standard used for PM2.5 breakpoints.

    Values are the stable identifiers accepted by the chart builders.
    """

    PM25 = "PM2.5"
    PM25_2024 = "PM2.5_2024"


class AirQualityCategory(IntEnum):
    """Ordinal health category, from least to most severe."""

    GOOD = 1
    MODERATE = 2
    UNHEALTHY_FOR_SENSITIVE_GROUPS = 3
    UNHEALTHY = 4
    VERY_UNHEALTHY = 5
    HAZARDOUS = 6


CATEGORY_LABELS: dict[AirQualityCategory, str] = {
    AirQualityCategory.GOOD: "Good",
    AirQualityCategory.MODERATE: "Moderate",
    AirQualityCategory.UNHEALTHY_FOR_SENSITIVE_GROUPS: "Unhealthy for Sensitive Groups",
    AirQualityCategory.UNHEALTHY: "Unhealthy",
    AirQualityCategory.VERY_UNHEALTHY: "Very Unhealthy",
    AirQualityCategory.HAZARDOUS: "Hazardous",
}


def category_label(category: AirQualityCategory | int) -> str:
    """Return the display name for a category."""

    return CATEGORY_LABELS[AirQualityCategory(category)]
