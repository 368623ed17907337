"""Validation for diurnal chart inputs.

Chart building is best-effort: windowing assumes a regular hourly series that
ends at the present hour and never fails on irregular input. This module
reports where an input departs from that assumption so callers can decide
whether the resulting chart is trustworthy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from analysis.day_windows import HOURS_PER_DAY, local_hours
from analysis.dto import DiurnalPlotInput

SAMPLE_INTERVAL = timedelta(hours=1)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a diurnal chart input."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_diurnal_input(data: DiurnalPlotInput) -> ValidationResult:
    """Validate a DiurnalPlotInput against the windowing preconditions.

    Args:
        data: Input to validate.

    Returns:
        ValidationResult. Errors mark inputs whose series are misaligned;
        warnings mark inputs whose yesterday/today slices may be shifted.
    """

    errors: list[str] = []
    warnings: list[str] = []

    count = len(data.datetime)
    if count == 0:
        errors.append("datetime must contain at least one timestamp.")
    for name in ("pm25", "nowcast"):
        length = len(getattr(data, name))
        if length != count:
            errors.append(f"{name} has {length} values but datetime has {count}.")

    if 0 < count <= HOURS_PER_DAY:
        warnings.append(f"Series has {count} samples; yesterday needs at least {HOURS_PER_DAY + 1}.")

    if len(data.hour_avg) != HOURS_PER_DAY:
        warnings.append(f"hour_avg has {len(data.hour_avg)} values; expected {HOURS_PER_DAY}.")

    if any(ts.tzinfo is None for ts in data.datetime):
        warnings.append("Naive timestamps are interpreted as UTC.")

    _validate_spacing(data, warnings=warnings)

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def _validate_spacing(data: DiurnalPlotInput, *, warnings: list[str]) -> None:
    """Append warnings for gaps, ordering problems and local-hour jumps."""

    timestamps = data.datetime
    naive = [ts.tzinfo is None for ts in timestamps]
    if len(timestamps) < 2:
        return
    if any(naive) and not all(naive):
        warnings.append("Timestamps mix naive and timezone-aware values.")
        return

    irregular = 0
    for previous, current in zip(timestamps, timestamps[1:]):
        step = current - previous
        if step <= timedelta(0):
            warnings.append(f"Timestamps are not strictly ascending at {current.isoformat()}.")
            return
        if step != SAMPLE_INTERVAL:
            irregular += 1
    if irregular:
        warnings.append(f"Series has {irregular} non-hourly steps (gaps or irregular sampling).")
        return

    # Regular UTC spacing can still skip or repeat a local hour across DST changes.
    hours = local_hours(timestamps, data.location.timezone)
    for previous, current in zip(hours, hours[1:]):
        if current != (previous + 1) % HOURS_PER_DAY:
            warnings.append("Local hours are not contiguous (daylight saving transition).")
            return
