"""
Pool configuration: roster size and the team count ranges for pools and matches.
"""
from dataclasses import dataclass
from typing import Any, Mapping

import yaml

from knockout.errors import InvalidSettings


@dataclass(frozen=True)
class MinMax:
    min: int
    max: int

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class PoolSettings:
    """Settings fixed for the whole lifetime of a pool."""

    players_per_team: int
    teams_in_pool: MinMax
    teams_in_match: MinMax

    def __post_init__(self):
        self.validate()

    def validate(self):
        if not isinstance(self.players_per_team, int) or self.players_per_team < 1:
            raise InvalidSettings(f"players_per_team must be a positive integer, got {self.players_per_team!r}")
        _check_range('teams_in_pool', self.teams_in_pool, lowest=1)
        # A regular match needs at least two rivals; single-team matches are byes.
        _check_range('teams_in_match', self.teams_in_match, lowest=2)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PoolSettings":
        """
        Build settings from a plain mapping, e.g. parsed YAML:

            players_per_team: 1
            teams_in_pool: {min: 2, max: 4}
            teams_in_match: {min: 2, max: 2}
        """
        if not isinstance(data, Mapping):
            raise InvalidSettings("Pool settings must be a mapping")
        try:
            return cls(
                players_per_team=data['players_per_team'],
                teams_in_pool=_min_max(data['teams_in_pool'], 'teams_in_pool'),
                teams_in_match=_min_max(data['teams_in_match'], 'teams_in_match'),
            )
        except KeyError as e:
            raise InvalidSettings(f"Missing pool setting: {e.args[0]}") from e


def load_settings(file_path) -> PoolSettings:
    """Load pool settings from a YAML file."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        try:
            data = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise InvalidSettings(f"Cannot parse {file_path}: {e}") from e
    if data is None:
        raise InvalidSettings(f"{file_path} is empty")
    return PoolSettings.from_dict(data)


def _min_max(value, name) -> MinMax:
    if isinstance(value, MinMax):
        return value
    if isinstance(value, Mapping):
        try:
            return MinMax(value['min'], value['max'])
        except KeyError as e:
            raise InvalidSettings(f"{name} is missing '{e.args[0]}'") from e
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return MinMax(value[0], value[1])
    raise InvalidSettings(f"{name} must be a {{min, max}} mapping, got {value!r}")


def _check_range(name, value, lowest):
    if not isinstance(value, MinMax):
        raise InvalidSettings(f"{name} must be a MinMax, got {value!r}")
    if not isinstance(value.min, int) or not isinstance(value.max, int):
        raise InvalidSettings(f"{name} bounds must be integers, got {value!r}")
    if value.min < lowest:
        raise InvalidSettings(f"{name}.min must be at least {lowest}, got {value.min}")
    if value.max < value.min:
        raise InvalidSettings(f"{name}.max ({value.max}) is lower than {name}.min ({value.min})")
