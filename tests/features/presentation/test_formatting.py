"""
Tests for display formatting helpers.
"""

import pytest

from match_analytics.features.presentation.formatting import (
    arena_placement,
    display_game_mode,
    format_game_duration,
    role_display_name,
)


@pytest.mark.parametrize(
    "seconds,expected",
    [(1865, "31m 05s"), (0, "0m 00s"), (59, "0m 59s"), (3600, "60m 00s"), (-5, "0m 00s")],
)
def test_format_game_duration(seconds, expected):
    """Test minutes and zero-padded seconds"""
    assert format_game_duration(seconds) == expected


class TestDisplayGameMode:
    """Test cases for game mode labels."""

    def test_arena_by_mode(self):
        """Test CHERRY shows as Arena."""
        assert display_game_mode("CHERRY") == "Arena"

    def test_arena_by_queue(self):
        """Test queue 1700 shows as Arena."""
        assert display_game_mode("CLASSIC", 1700) == "Arena"

    def test_other_modes(self):
        """Test other modes are capitalized."""
        assert display_game_mode("CLASSIC", 420) == "Classic"
        assert display_game_mode("ULTBOOK_MODE") == "Ultbook mode"


class TestRoleDisplayName:
    """Test cases for role labels."""

    @pytest.mark.parametrize(
        "role,expected",
        [
            ("Top", "Top Lane"),
            ("MIDDLE", "Mid Lane"),
            ("Bot", "Bot Lane"),
            ("UTILITY", "Support"),
            ("ARAM", "ARAM"),
            ("Arena", "Arena"),
        ],
    )
    def test_known_roles(self, role, expected):
        """Test buckets and raw tags get long names."""
        assert role_display_name(role) == expected

    def test_unknown_role_unchanged(self):
        """Test unknown roles are shown as given."""
        assert role_display_name("Unknown") == "Unknown"

    def test_empty_role(self):
        """Test a missing role gives an empty label."""
        assert role_display_name(None) == ""
        assert role_display_name("") == ""


class TestArenaPlacement:
    """Test cases for arena placement."""

    def test_arena_game(self, make_record):
        """Test the supplied placement is returned."""
        record = make_record(game_mode="CHERRY", queue_id=1700, placement=2)

        assert arena_placement(record) == 2

    def test_arena_without_placement(self, make_record):
        """Test placement is never derived from other stats."""
        record = make_record(game_mode="CHERRY", queue_id=1700, kills=20, win=True)

        assert arena_placement(record) is None

    def test_not_arena(self, make_record):
        """Test non-Arena games have no placement."""
        assert arena_placement(make_record(placement=1)) is None
