"""
Tests for the exception hierarchy.
"""

from match_analytics.core.exceptions import (
    AnalyticsError,
    MatchExtractionError,
    SnapshotBuildError,
)


def test_base_error_str():
    """Test the operation prefixes the message"""
    error = AnalyticsError("boom", operation="aggregate")

    assert str(error) == "[aggregate] boom"
    assert error.context == {}
    assert str(AnalyticsError("boom")) == "boom"


def test_snapshot_build_error():
    """Test snapshot errors carry their context"""
    cause = KeyError("data")
    error = SnapshotBuildError("missing data", context={"document": "item"}, original_error=cause)

    assert isinstance(error, AnalyticsError)
    assert error.operation == "build_snapshot"
    assert error.message == "Snapshot build failed: missing data"
    assert error.original_error is cause


def test_match_extraction_error_context():
    """Test only known identifiers are added to the context"""
    error = MatchExtractionError("not found", match_id="EUW1_1", puuid="p-1")

    assert error.context == {"match_id": "EUW1_1", "puuid": "p-1"}
    assert MatchExtractionError("bad").context == {}
