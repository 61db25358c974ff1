"""Arithmetic helpers that never divide by zero."""

from typing import List


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, falling back to ``default`` for a zero denominator."""
    return numerator / denominator if denominator != 0 else default


def safe_mean(values: List[float], default: float = 0.0) -> float:
    """Arithmetic mean, or ``default`` for an empty list."""
    return sum(values) / len(values) if values else default


def kda_ratio(kills: int, deaths: int, assists: int) -> float:
    """
    Calculate KDA (Kill/Death/Assist) ratio.

    KDA = (Kills + Assists) / Deaths
    If deaths is 0, KDA = Kills + Assists (perfect performance)
    """
    return safe_divide(kills + assists, deaths, default=float(kills + assists))


def per_minute(total: float, seconds: float) -> float:
    """Scale a total over a duration in seconds to a per-minute rate."""
    return safe_divide(total, seconds / 60)


def percentage(part: float, whole: float) -> float:
    """Express ``part`` as a percentage of ``whole``, 0 for an empty whole."""
    return safe_divide(part, whole) * 100
