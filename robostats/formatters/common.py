"""Shared text helpers for the report formatters.

Every numeric helper maps ``None`` to ``"N/A"`` before any formatting is
attempted, so nullable upstream fields never raise.
"""
from __future__ import annotations

import re
import time
from typing import Any, Iterable, Iterator, Mapping, Optional

NA = "N/A"


def fixed(value: Any, digits: int = 2) -> str:
    """Fixed-decimal rendering; ``N/A`` for missing values."""
    if value is None:
        return NA
    try:
        return f"{value:.{digits}f}"
    except (TypeError, ValueError):
        return str(value)


def pct(rate: Any, digits: int = 1) -> str:
    """Render a 0–1 fraction as a percentage string (``0.5`` → ``50.0%``)."""
    if rate is None:
        return NA
    try:
        return f"{rate * 100:.{digits}f}%"
    except (TypeError, ValueError):
        return str(rate)


def plain(value: Any) -> str:
    """Render a value as-is; whole floats drop their trailing ``.0``.

    Booleans are spelled the JSON way (``true``/``false``).
    """
    if value is None:
        return NA
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def thousands(value: Any) -> str:
    if value is None:
        return NA
    try:
        return f"{value:,}"
    except (TypeError, ValueError):
        return str(value)


def or_na(value: Any) -> str:
    """Text field fallback: empty or missing strings become ``N/A``."""
    return str(value) if value else NA


def yes_no(flag: Any) -> str:
    return "Yes" if flag else "No"


def wlt(record: Optional[Mapping[str, Any]]) -> str:
    """``W-L-T`` from a record block."""
    record = record or {}
    return f"{plain(record.get('wins', 0))}-{plain(record.get('losses', 0))}-{plain(record.get('ties', 0))}"


def location(state: Any, country: Any) -> str:
    """``State, Country`` or just the country when no state is set."""
    return f"{state}, {country}" if state else f"{country or NA}"


def timestamp(epoch: Any) -> Optional[str]:
    """UTC wall-clock rendering of a Unix timestamp, or None if unset."""
    if not isinstance(epoch, (int, float)) or epoch <= 0:
        return None
    try:
        return time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime(epoch))
    except (OverflowError, OSError, ValueError):
        return None


def readable(key: str) -> str:
    """``auto_coral_points_mean`` → ``Auto Coral Points``."""
    text = re.sub(r"_mean$", "", key).replace("_", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text)


def open_items(
    mapping: Optional[Mapping[str, Any]], exclude: Iterable[str] = (),
) -> Iterator[tuple[str, Any]]:
    """Yield the entries of a season-specific mapping in source order,
    skipping keys already rendered elsewhere and null values."""
    skip = set(exclude)
    for key, value in (mapping or {}).items():
        if key in skip or value is None:
            continue
        yield key, value


def join_keys(keys: Optional[Iterable[Any]]) -> str:
    return ", ".join(str(k) for k in (keys or []))


def empty(resource: str) -> str:
    return f"No {resource} found."
