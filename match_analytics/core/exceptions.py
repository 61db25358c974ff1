"""
Custom exceptions for the payload decoding boundary.

Analytics and resolution functions never raise; only the helpers that decode
caller-supplied payloads into models do, using the exceptions below.
"""

from typing import Any, Dict, Optional


class AnalyticsError(Exception):
    """Base exception for all match analytics errors."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class SnapshotBuildError(AnalyticsError):
    """Exception raised when a static data payload cannot be turned into a snapshot."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"Snapshot build failed: {message}",
            operation="build_snapshot",
            context=context,
            original_error=original_error,
        )


class MatchExtractionError(AnalyticsError):
    """Exception raised when a match payload cannot be turned into a record."""

    def __init__(
        self,
        message: str,
        match_id: Optional[str] = None,
        puuid: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        context: Dict[str, Any] = {}
        if match_id:
            context["match_id"] = match_id
        if puuid:
            context["puuid"] = puuid

        super().__init__(
            message=message,
            operation="extract_match_record",
            context=context,
            original_error=original_error,
        )
        self.match_id = match_id
        self.puuid = puuid
