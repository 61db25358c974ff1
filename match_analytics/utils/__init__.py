"""Utility functions and helpers."""

from .statistics import safe_divide, safe_mean, kda_ratio, per_minute, percentage

__all__ = [
    "safe_divide",
    "safe_mean",
    "kda_ratio",
    "per_minute",
    "percentage",
]
