"""Relative time strings ("3 days ago", "2 hours from now") from epoch milliseconds."""

import time
from typing import Optional, Sequence, Tuple

_SECOND_MS = 1000
_MINUTE_MS = 60 * _SECOND_MS
_HOUR_MS = 60 * _MINUTE_MS
_DAY_MS = 24 * _HOUR_MS

# Ascending; each unit covers [size, next size)
TIME_UNITS: Sequence[Tuple[int, str]] = (
    (_SECOND_MS, "second"),
    (_MINUTE_MS, "minute"),
    (_HOUR_MS, "hour"),
    (_DAY_MS, "day"),
    (7 * _DAY_MS, "week"),
    (30 * _DAY_MS, "month"),
    (365 * _DAY_MS, "year"),
    (10 * 365 * _DAY_MS, "decade"),
    (100 * 365 * _DAY_MS, "century"),
)

JUST_NOW = "Just now"

_ES_ENDINGS = ("s", "sh", "ch", "x", "o")
_VOWELS = "aeiou"


def current_time_millis() -> int:
    return time.time_ns() // 1_000_000


def to_relative_time(timestamp_ms: int, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = current_time_millis()

    diff = now_ms - timestamp_ms
    if diff < 0:
        return compute_future_relative_time(diff)
    return compute_past_relative_time(diff)


def compute_past_relative_time(diff_ms: int) -> str:
    return _format_bucket(diff_ms, "ago")


def compute_future_relative_time(diff_ms: int) -> str:
    """``diff_ms`` is negative (the timestamp lies ahead of now)."""
    return _format_bucket(-diff_ms, "from now")


def _format_bucket(span_ms: int, direction: str) -> str:
    for index, (unit_ms, unit_name) in enumerate(TIME_UNITS):
        is_last = index == len(TIME_UNITS) - 1
        if span_ms < unit_ms:
            continue
        if not is_last and span_ms >= TIME_UNITS[index + 1][0]:
            continue

        count = span_ms // unit_ms
        word = to_plural_form(unit_name) if count > 1 else unit_name
        return f"{count} {word} {direction}"

    return JUST_NOW


def to_plural_form(word: str) -> str:
    lowered = word.lower()

    if lowered.endswith(_ES_ENDINGS):
        return word + "es"

    if lowered.endswith("y"):
        if len(lowered) > 1 and lowered[-2] in _VOWELS:
            return word + "s"
        return word[:-1] + "ies"

    if lowered.endswith("f"):
        return word[:-1] + "ves"

    return word + "s"
