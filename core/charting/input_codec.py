"""Encoding/decoding helpers for diurnal chart payloads.

Inputs arrive as flat records using the keys of the monitoring API
(`datetime`, `nowcast`, `locationName`, ...). Outputs leave as JSON text for
the renderer.
"""

from __future__ import annotations

import json
import math
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from analysis.dto import DiurnalPlotInput, Location

from .schema import HighchartsConfig

REQUIRED_KEYS = ("datetime", "nowcast", "hour_avg", "latitude", "longitude", "locationName", "timezone")


def decode_diurnal_input(payload: dict[str, Any]) -> DiurnalPlotInput:
    """Decode a DiurnalPlotInput from a flat record.

    Args:
        payload: Record with `datetime`, `pm25`, `nowcast`, `hour_avg`,
            `latitude`, `longitude`, `locationName`, `timezone` and optional `title`.

    Returns:
        DiurnalPlotInput instance.

    Raises:
        ValueError: When required keys are missing, a timestamp or coordinate
            cannot be parsed, or the timezone is unknown.
    """

    missing = [key for key in REQUIRED_KEYS if payload.get(key) is None]
    if missing:
        raise ValueError(f"Missing required keys: {missing}.")

    timezone = str(payload["timezone"])
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {timezone!r}.") from exc

    timestamps = tuple(_parse_datetime(value) for value in payload["datetime"])
    title = payload.get("title")
    return DiurnalPlotInput(
        datetime=timestamps,
        pm25=tuple(_parse_float(value) for value in payload.get("pm25") or ()),
        nowcast=tuple(_parse_float(value) for value in payload["nowcast"]),
        hour_avg=tuple(_parse_float(value) for value in payload["hour_avg"]),
        location=Location(
            latitude=_parse_coordinate(payload["latitude"], name="latitude"),
            longitude=_parse_coordinate(payload["longitude"], name="longitude"),
            name=str(payload["locationName"]),
            timezone=timezone,
        ),
        title=None if title is None else str(title),
    )


def encode_chart_config(config: HighchartsConfig) -> str:
    """Encode a chart configuration as JSON text for the renderer."""

    return json.dumps(config, ensure_ascii=False)


def _parse_datetime(value: object) -> datetime:
    """Parse a datetime, ISO string, or epoch milliseconds value."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=UTC)
    try:
        return datetime.fromisoformat(str(value))
    except ValueError as exc:
        raise ValueError(f"Unparseable timestamp: {value!r}.") from exc


def _parse_float(value: object) -> float | None:
    """Best-effort float parsing; missing and non-finite values become None."""

    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        parsed = float(str(value))
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def _parse_coordinate(value: object, *, name: str) -> float:
    """Parse a required coordinate."""

    parsed = _parse_float(value)
    if parsed is None:
        raise ValueError(f"{name} must be numeric, got {value!r}.")
    return parsed
