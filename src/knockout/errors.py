"""
Errors raised by the knockout pool engine.

Every error derives from PoolError so callers can catch the whole family
at once. None of them leave the pool in a partially-updated state.
"""


class PoolError(Exception):
    """Base class for all pool engine errors."""


class InvalidSettings(PoolError):
    """Raised when pool settings fail validation."""


class PoolAlreadyStarted(PoolError):
    def __init__(self):
        super().__init__("Pool has already been started")


class PoolAlreadyEnded(PoolError):
    def __init__(self):
        super().__init__("Pool has already ended")


class PoolNotStarted(PoolError):
    def __init__(self):
        super().__init__("Pool has not been started yet")


class TooManyTeams(PoolError):
    def __init__(self, maximum):
        self.maximum = maximum
        super().__init__(f"Maximum number of teams ({maximum}) already reached")


class BelowMinimumTeams(PoolError):
    def __init__(self, complete, minimum):
        self.complete = complete
        self.minimum = minimum
        super().__init__(f"Only {complete} complete teams, at least {minimum} required")


class DuplicateTeam(PoolError):
    def __init__(self, team_id):
        self.team_id = team_id
        super().__init__(f"Team '{team_id}' is already registered")


class TeamNotFound(PoolError):
    def __init__(self, team_id):
        self.team_id = team_id
        super().__init__(f"Team '{team_id}' not found")


class MatchNotFound(PoolError):
    def __init__(self, match_id):
        self.match_id = match_id
        super().__init__(f"Match '{match_id}' not found")


class TeamNotRival(PoolError):
    def __init__(self, match_id, team_id):
        self.match_id = match_id
        self.team_id = team_id
        super().__init__(f"Team '{team_id}' is not a rival in match '{match_id}'")


class CapacityExceeded(PoolError):
    def __init__(self, team_id, capacity):
        self.team_id = team_id
        self.capacity = capacity
        super().__init__(f"Team '{team_id}' cannot hold more than {capacity} players")


class WinnerAlreadySet(PoolError):
    def __init__(self, match_id, winner_id):
        self.match_id = match_id
        self.winner_id = winner_id
        super().__init__(f"Match '{match_id}' already has winner '{winner_id}'")


class InternalInconsistency(PoolError):
    """A match expected to carry a winner does not."""

    def __init__(self, message):
        super().__init__(message)
