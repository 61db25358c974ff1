"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import AnalyticsError, SnapshotBuildError, MatchExtractionError
from .enums import (
    AssetKind,
    DisplayRole,
    GameMode,
    QueueType,
    SortColumn,
    SortDirection,
)
from .logging import setup_logging, get_logger

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "AnalyticsError",
    "SnapshotBuildError",
    "MatchExtractionError",
    # Enums
    "AssetKind",
    "DisplayRole",
    "GameMode",
    "QueueType",
    "SortColumn",
    "SortDirection",
    # Logging
    "setup_logging",
    "get_logger",
]
