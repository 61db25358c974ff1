"""
Tests for enum aliases.
"""

import pytest

from match_analytics.core.enums import SortColumn, SortDirection


@pytest.mark.parametrize(
    "value,expected",
    [
        ("asc", SortDirection.ASC),
        ("ascending", SortDirection.ASC),
        ("Descending", SortDirection.DESC),
    ],
)
def test_sort_direction_aliases(value, expected):
    """Test spelled-out sort directions map onto the enum"""
    assert SortDirection(value) is expected


def test_sort_direction_unknown():
    """Test unknown directions are rejected by the enum"""
    with pytest.raises(ValueError):
        SortDirection("sideways")


@pytest.mark.parametrize(
    "value,expected",
    [("games", SortColumn.GAMES_PLAYED), ("win_rate", SortColumn.WIN_RATE), ("champion", SortColumn.NAME)],
)
def test_sort_column_aliases(value, expected):
    """Test short and snake_case column ids map onto the enum"""
    assert SortColumn(value) is expected
