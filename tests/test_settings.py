"""
Tests for pool settings validation and YAML loading.
"""
import dataclasses
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from knockout.errors import InvalidSettings
from knockout.settings import MinMax, PoolSettings, load_settings


class TestPoolSettings:
    """Tests for PoolSettings validation."""

    def test_valid_settings(self):
        """Well-formed settings are accepted as given."""
        settings = PoolSettings(2, MinMax(2, 8), MinMax(2, 3))
        assert settings.players_per_team == 2
        assert settings.teams_in_pool == MinMax(2, 8)
        assert settings.teams_in_match.max == 3

    def test_settings_are_immutable(self):
        """Settings cannot change after construction."""
        settings = PoolSettings(1, MinMax(2, 4), MinMax(2, 2))
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.players_per_team = 3

    @pytest.mark.parametrize("players,pool_range,match_range", [
        (0, MinMax(2, 4), MinMax(2, 2)),
        (1, MinMax(0, 4), MinMax(2, 2)),
        (1, MinMax(5, 4), MinMax(2, 2)),
        (1, MinMax(2, 4), MinMax(1, 2)),
        (1, MinMax(2, 4), MinMax(3, 2)),
        (1, (2, 4), MinMax(2, 2)),
    ])
    def test_invalid_settings(self, players, pool_range, match_range):
        """Out of range values are rejected."""
        with pytest.raises(InvalidSettings):
            PoolSettings(players, pool_range, match_range)

    def test_min_max_contains(self):
        """MinMax bounds are inclusive."""
        limits = MinMax(2, 4)
        assert limits.contains(2)
        assert limits.contains(4)
        assert not limits.contains(1)
        assert not limits.contains(5)


class TestFromDict:
    """Tests for building settings from plain data."""

    def test_from_dict(self):
        """Nested min/max mappings are accepted."""
        settings = PoolSettings.from_dict({
            'players_per_team': 3,
            'teams_in_pool': {'min': 2, 'max': 16},
            'teams_in_match': {'min': 2, 'max': 2},
        })
        assert settings == PoolSettings(3, MinMax(2, 16), MinMax(2, 2))

    def test_from_dict_accepts_pairs(self):
        """Two-element lists work as min/max pairs."""
        settings = PoolSettings.from_dict({
            'players_per_team': 1,
            'teams_in_pool': [2, 4],
            'teams_in_match': [2, 2],
        })
        assert settings.teams_in_pool == MinMax(2, 4)

    def test_missing_key(self):
        """A missing setting is reported by name."""
        with pytest.raises(InvalidSettings, match='teams_in_match'):
            PoolSettings.from_dict({'players_per_team': 1, 'teams_in_pool': {'min': 2, 'max': 4}})

    def test_missing_bound(self):
        """A range without one of its bounds is rejected."""
        with pytest.raises(InvalidSettings, match='max'):
            PoolSettings.from_dict({
                'players_per_team': 1,
                'teams_in_pool': {'min': 2},
                'teams_in_match': {'min': 2, 'max': 2},
            })

    def test_not_a_mapping(self):
        """Top-level data must be a mapping."""
        with pytest.raises(InvalidSettings):
            PoolSettings.from_dict(['players_per_team', 1])


class TestLoadSettings:
    """Tests for reading settings from YAML files."""

    def test_load_settings(self, tmp_path):
        """Settings load from a YAML file."""
        path = tmp_path / "pool.yaml"
        path.write_text(
            "players_per_team: 2\n"
            "teams_in_pool: {min: 2, max: 8}\n"
            "teams_in_match: {min: 2, max: 2}\n"
        )
        settings = load_settings(str(path))
        assert settings == PoolSettings(2, MinMax(2, 8), MinMax(2, 2))

    def test_load_empty_file(self, tmp_path):
        """An empty file is not a valid configuration."""
        path = tmp_path / "pool.yaml"
        path.write_text("")
        with pytest.raises(InvalidSettings):
            load_settings(str(path))

    def test_load_malformed_yaml(self, tmp_path):
        """YAML syntax errors surface as InvalidSettings."""
        path = tmp_path / "pool.yaml"
        path.write_text("players_per_team: [1, 2\n")
        with pytest.raises(InvalidSettings):
            load_settings(str(path))

    def test_bundled_demo_settings(self):
        """The demo settings shipped in data/ are valid."""
        path = os.path.join(os.path.dirname(__file__), '..', 'data', 'pool.yaml')
        settings = load_settings(path)
        assert settings.players_per_team == 2
