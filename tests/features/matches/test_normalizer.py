"""
Tests for per-match derived metrics.
"""

import pytest

from match_analytics.features.matches.normalizer import (
    calculate_kda,
    cs_per_min,
    display_role,
    is_arena,
    kill_participation,
    normalize_match,
)


class TestKda:
    """Test cases for KDA."""

    def test_zero_deaths(self):
        """Test zero deaths uses a denominator of 1."""
        assert calculate_kda(kills=5, deaths=0, assists=3) == 8

    def test_nonzero_deaths(self):
        """Test the regular ratio."""
        assert calculate_kda(kills=4, deaths=2, assists=6) == 5

    def test_all_zero(self):
        """Test a game without kills, deaths or assists."""
        assert calculate_kda(0, 0, 0) == 0


class TestCsPerMin:
    """Test cases for CS per minute."""

    def test_zero_duration(self):
        """Test a zero-length game gives 0."""
        assert cs_per_min(total_minions_killed=100, game_duration=0) == 0

    def test_regular_game(self):
        """Test 180 CS in 30 minutes."""
        assert cs_per_min(180, 1800) == pytest.approx(6.0)


class TestKillParticipation:
    """Test cases for kill participation."""

    def test_ratio(self):
        """Test (kills + assists) / team kills."""
        assert kill_participation(kills=3, assists=5, team_kills=16) == pytest.approx(0.5)

    def test_zero_team_kills(self):
        """Test a team without kills gives 0."""
        assert kill_participation(kills=0, assists=0, team_kills=0) == 0


class TestDisplayRole:
    """Test cases for role bucket mapping."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("TOP", "Top"),
            ("JUNGLE", "Jungle"),
            ("MID", "Mid"),
            ("MIDDLE", "Mid"),
            ("BOT", "Bot"),
            ("BOTTOM", "Bot"),
            ("ADC", "Bot"),
            ("SUPPORT", "Support"),
            ("UTILITY", "Support"),
            ("utility", "Support"),
        ],
    )
    def test_position_tags(self, tag, expected):
        """Test lane tags map onto display buckets."""
        assert display_role(tag, "CLASSIC") == expected

    def test_aram_overrides_position(self):
        """Test ARAM games are bucketed by mode."""
        assert display_role("MIDDLE", "ARAM") == "ARAM"

    def test_arena_modes(self):
        """Test CHERRY and ARENA map to Arena."""
        assert display_role("", "CHERRY") == "Arena"
        assert display_role("", "ARENA") == "Arena"

    def test_arena_queue_regardless_of_mode(self):
        """Test queue 1700 is Arena whatever mode is reported."""
        assert display_role("TOP", "CLASSIC", queue_id=1700) == "Arena"
        assert is_arena("CLASSIC", 1700)
        assert not is_arena("CLASSIC", 420)

    def test_arena_queue_beats_aram_mode(self):
        """Test queue 1700 is Arena even when the mode says ARAM."""
        assert display_role("TOP", "ARAM", queue_id=1700) == "Arena"
        assert display_role("TOP", "ARAM", queue_id=450) == "ARAM"

    def test_unrecognized_tag_passes_through(self):
        """Test unknown tags are kept as is."""
        assert display_role("NONE", "CLASSIC") == "NONE"
        assert display_role("Invalid", "CLASSIC") == "Invalid"

    def test_empty_tag(self):
        """Test a missing tag becomes Unknown."""
        assert display_role("", "CLASSIC") == "Unknown"
        assert display_role(None) == "Unknown"


class TestNormalizeMatch:
    """Test cases for normalize_match."""

    def test_derived_fields(self, make_record):
        """Test derived metrics are attached to the record."""
        record = make_record(kills=4, deaths=2, assists=6, team_position="UTILITY", team_kills=20)

        normalized = normalize_match(record)

        assert normalized.kda == 5
        assert normalized.cs_per_min == pytest.approx(6.0)
        assert normalized.display_role == "Support"
        assert normalized.kill_participation_ratio == pytest.approx(0.5)
        assert normalized.match_id == record.match_id

    def test_upstream_kill_participation_without_team_kills(self, make_record):
        """Test the upstream value is used when team kills are unknown."""
        record = make_record(kill_participation=0.42)

        assert normalize_match(record).kill_participation_ratio == pytest.approx(0.42)

    def test_no_kill_participation_data(self, make_record):
        """Test missing kill participation data gives 0."""
        assert normalize_match(make_record()).kill_participation_ratio == 0

    def test_record_not_mutated(self, make_record):
        """Test the input record is left untouched."""
        record = make_record()
        before = record.model_dump()

        normalize_match(record)

        assert record.model_dump() == before
