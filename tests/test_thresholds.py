"""Unit tests for PM2.5 category, color and axis threshold helpers."""

from __future__ import annotations

import math

import pytest

from analysis.categories import NAAQS, AirQualityCategory, category_label
from analysis.thresholds import (
    CATEGORY_COLORS,
    NAAQS_THRESHOLDS,
    classify,
    color_for,
    resolve_naaqs,
    threshold_lines,
    y_axis_ceiling,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("concentration", "expected"),
    [
        (0, AirQualityCategory.GOOD),
        (12, AirQualityCategory.GOOD),
        (12.1, AirQualityCategory.MODERATE),
        (35, AirQualityCategory.MODERATE),
        (35.5, AirQualityCategory.UNHEALTHY_FOR_SENSITIVE_GROUPS),
        (55, AirQualityCategory.UNHEALTHY_FOR_SENSITIVE_GROUPS),
        (150, AirQualityCategory.UNHEALTHY),
        (250, AirQualityCategory.VERY_UNHEALTHY),
        (250.1, AirQualityCategory.HAZARDOUS),
        (10_000, AirQualityCategory.HAZARDOUS),
    ],
)
def test_classify_uses_legacy_boundaries_by_default(concentration: float, expected: AirQualityCategory) -> None:
    """Each category covers (previous boundary, boundary]."""

    assert classify(concentration) == expected


def test_classify_uses_2024_boundaries_when_selected() -> None:
    """The 2024 standard lowers the Good and Unhealthy boundaries."""

    assert classify(10, NAAQS.PM25_2024) == AirQualityCategory.MODERATE
    assert classify(10, NAAQS.PM25) == AirQualityCategory.GOOD
    assert classify(130, "PM2.5_2024") == AirQualityCategory.VERY_UNHEALTHY
    assert classify(230, "PM2.5_2024") == AirQualityCategory.HAZARDOUS


def test_classify_is_monotonic_and_bounded() -> None:
    """Categories never decrease as concentration grows."""

    for naaqs in NAAQS:
        previous = AirQualityCategory.GOOD
        for tenth in range(0, 4000):
            category = classify(tenth / 10, naaqs)
            assert 1 <= category <= 6
            assert category >= previous
            previous = category


def test_classify_nan_falls_through_to_hazardous() -> None:
    """NaN fails every comparison and lands in the last category."""

    assert classify(math.nan) == AirQualityCategory.HAZARDOUS


@pytest.mark.parametrize("selector", ["PM10", "", None, "pm2.5"])
def test_unknown_selector_falls_back_to_2024(selector: object) -> None:
    """Unknown selectors resolve to the 2024 standard instead of raising."""

    assert resolve_naaqs(selector) is NAAQS.PM25_2024  # type: ignore[arg-type]
    assert classify(10, selector) == AirQualityCategory.MODERATE  # type: ignore[arg-type]


def test_threshold_sets_start_at_zero_and_ascend() -> None:
    """Every threshold set has six strictly ascending boundaries from 0."""

    for thresholds in NAAQS_THRESHOLDS.values():
        assert len(thresholds) == 6
        assert thresholds[0] == 0
        assert all(a < b for a, b in zip(thresholds, thresholds[1:]))


def test_color_for_matches_category() -> None:
    """Colors are indexed by category minus one."""

    assert color_for(5) == "rgb(0,255,0)"
    assert color_for(40) == "rgb(255,126,0)"
    assert color_for(300) == "rgb(126,0,35)"
    for value in (0, 20, 45, 100, 200, 400):
        assert color_for(value) == CATEGORY_COLORS[classify(value) - 1]


@pytest.mark.parametrize(
    ("maximum", "expected"),
    [
        (0, 50),
        (50, 50),
        (51, 100),
        (150, 200),
        (300, 500),
        (400, 500),
        (401, 600),
        (999, 1000),
        (1500, 1500),
        (2000, 2100),
    ],
)
def test_y_axis_ceiling_ladder(maximum: float, expected: float) -> None:
    """Ceilings snap to the fixed ladder, then grow by 5% above 1500."""

    assert y_axis_ceiling(maximum) == pytest.approx(expected)


def test_y_axis_ceiling_is_monotonic() -> None:
    """A larger maximum never yields a smaller ceiling."""

    ceilings = [y_axis_ceiling(value) for value in range(0, 3000, 7)]
    assert ceilings == sorted(ceilings)


def test_threshold_lines_cover_categories_two_to_six() -> None:
    """Five ascending lines colored by the category they open."""

    lines = threshold_lines(3)
    assert [line["value"] for line in lines] == [12, 35, 55, 150, 250]
    assert [line["color"] for line in lines] == list(CATEGORY_COLORS[1:])
    assert {line["width"] for line in lines} == {3}


def test_threshold_lines_default_width_and_2024_values() -> None:
    """Default width is 2; the 2024 standard moves three boundaries."""

    lines = threshold_lines(naaqs=NAAQS.PM25_2024)
    assert [line["value"] for line in lines] == [9, 35, 55, 125, 225]
    assert all(line["width"] == 2 for line in lines)


def test_category_label_accepts_ordinals() -> None:
    """Labels can be looked up by enum member or plain int."""

    assert category_label(AirQualityCategory.GOOD) == "Good"
    assert category_label(3) == "Unhealthy for Sensitive Groups"
