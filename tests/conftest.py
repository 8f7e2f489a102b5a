"""
Shared pytest fixtures for the knockout pool tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from knockout import MinMax, Pool, PoolSettings


def make_settings(players=1, pool_min=2, pool_max=4, match_min=2, match_max=2):
    return PoolSettings(
        players_per_team=players,
        teams_in_pool=MinMax(pool_min, pool_max),
        teams_in_match=MinMax(match_min, match_max),
    )


def register(pool, *team_ids):
    """Add one-player teams whose only member shares the team id."""
    for team_id in team_ids:
        pool.add_team(team_id)
        pool.add_member_to_team(team_id, team_id)


def rivals_of(matches):
    return [list(match.rivals) for match in matches]


class EventRecorder:
    """Collects every event a pool emits, in order."""

    def __init__(self, pool):
        self.log = []
        pool.events.on_team_completed(lambda team: self.log.append(('team_completed', team)))
        pool.events.on_match_scheduled(lambda match: self.log.append(('match_scheduled', match)))
        pool.events.on_stage_scheduled(lambda matches: self.log.append(('stage_scheduled', matches)))
        pool.events.on_pool_ended(lambda ended: self.log.append(('pool_ended', ended)))

    def names(self):
        return [name for name, _ in self.log]

    def payloads(self, name):
        return [payload for event, payload in self.log if event == name]


@pytest.fixture
def settings():
    """One player per team, 2-4 teams, head-to-head matches."""
    return make_settings()


@pytest.fixture
def pool(settings):
    return Pool(settings)


@pytest.fixture
def recorder(pool):
    return EventRecorder(pool)


@pytest.fixture
def four_team_pool(pool):
    register(pool, "T1", "T2", "T3", "T4")
    return pool


@pytest.fixture
def three_team_pool(pool):
    register(pool, "T1", "T2", "T3")
    return pool
