# app/calculation.py
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (12.5 -> 13)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def percent(hits: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return float(round_half_up(100.0 * hits / total))


def words_per_minute(words: int, seconds: float) -> int:
    """
    WPM = words / (seconds / 60), rounded.
    Zero or negative durations give 0 instead of inf/nan.
    """
    if seconds <= 0:
        return 0
    return round_half_up(words / (seconds / 60.0))
