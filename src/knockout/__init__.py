"""
In-memory single elimination pool engine.

Teams fill up to a fixed roster size, then play stage after stage of
matches until a single team remains.
"""
from knockout.errors import (
    BelowMinimumTeams,
    CapacityExceeded,
    DuplicateTeam,
    InternalInconsistency,
    InvalidSettings,
    MatchNotFound,
    PoolAlreadyEnded,
    PoolAlreadyStarted,
    PoolError,
    PoolNotStarted,
    TeamNotFound,
    TeamNotRival,
    TooManyTeams,
    WinnerAlreadySet,
)
from knockout.events import PoolEvents
from knockout.models import Match, MatchView, Team, TeamView
from knockout.pool import Pool
from knockout.settings import MinMax, PoolSettings, load_settings

__all__ = [
    "Pool",
    "PoolEvents",
    "PoolSettings",
    "MinMax",
    "load_settings",
    "Team",
    "TeamView",
    "Match",
    "MatchView",
    # Errors
    "PoolError",
    "InvalidSettings",
    "PoolAlreadyStarted",
    "PoolAlreadyEnded",
    "PoolNotStarted",
    "TooManyTeams",
    "BelowMinimumTeams",
    "DuplicateTeam",
    "TeamNotFound",
    "MatchNotFound",
    "TeamNotRival",
    "CapacityExceeded",
    "WinnerAlreadySet",
    "InternalInconsistency",
]
