"""Pytest fixtures shared across diurnal chart tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime, timedelta

import pytest

from analysis.dto import DiurnalPlotInput, Location


@pytest.fixture
def make_input() -> Callable[..., DiurnalPlotInput]:
    """Return a factory for regular hourly DiurnalPlotInput values.

    The series ends at `end` and contains `hours` samples spaced one hour apart.
    """

    def _make(
        *,
        end: datetime = datetime(2024, 6, 15, 19, 0, tzinfo=UTC),
        hours: int = 48,
        timezone: str = "UTC",
        nowcast: Sequence[float | None] | None = None,
        hour_avg: Sequence[float | None] | None = None,
        title: str | None = None,
        latitude: float = 0.0,
        longitude: float = 0.0,
        name: str = "Test Site",
    ) -> DiurnalPlotInput:
        timestamps = tuple(end - timedelta(hours=hours - 1 - i) for i in range(hours))
        values = tuple(nowcast) if nowcast is not None else tuple(float(i % 30) for i in range(hours))
        return DiurnalPlotInput(
            datetime=timestamps,
            pm25=values,
            nowcast=values,
            hour_avg=tuple(hour_avg) if hour_avg is not None else tuple(10.0 for _ in range(24)),
            location=Location(latitude=latitude, longitude=longitude, name=name, timezone=timezone),
            title=title,
        )

    return _make


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests.
    - `integration`: tests exercising astral or the tz database end to end.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
