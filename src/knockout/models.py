from dataclasses import dataclass
from typing import Optional, Tuple

from knockout.errors import CapacityExceeded, TeamNotRival, WinnerAlreadySet

# Teams enter the pool having reached the first stage.
INITIAL_ROUNDS_WON = 1


@dataclass(frozen=True)
class TeamView:
    """Read-only snapshot of a team, handed to observers and query callers."""
    id: str
    capacity: int
    members: Tuple[str, ...]
    rounds_won: int

    @property
    def is_complete(self):
        return len(self.members) == self.capacity


@dataclass(frozen=True)
class MatchView:
    """Read-only snapshot of a match."""
    id: str
    stage: int
    rivals: Tuple[str, ...]
    winner: Optional[str]

    @property
    def is_bye(self):
        return len(self.rivals) == 1

    @property
    def is_resolved(self):
        return self.winner is not None


class Team:
    def __init__(self, id, capacity):
        self.id = id
        self.capacity = capacity
        self.members = []
        self.rounds_won = INITIAL_ROUNDS_WON

    def add_member(self, user_id):
        if self.is_complete():
            raise CapacityExceeded(self.id, self.capacity)
        self.members.append(user_id)
        return self

    def add_members(self, user_ids):
        """Add several members at once; nothing is added if they do not all fit."""
        user_ids = list(user_ids)
        if len(self.members) + len(user_ids) > self.capacity:
            raise CapacityExceeded(self.id, self.capacity)
        self.members.extend(user_ids)
        return self

    def is_complete(self):
        return len(self.members) == self.capacity

    def advance_round(self):
        self.rounds_won += 1
        return self

    def view(self):
        return TeamView(
            id=self.id,
            capacity=self.capacity,
            members=tuple(self.members),
            rounds_won=self.rounds_won,
        )

    def __repr__(self):
        return f"Team(id={self.id}, members={self.members}, rounds_won={self.rounds_won})"


class Match:
    """
    A bout between rival teams at a given stage.

    Rivals and the winner are stored as team ids; the pool owning the match
    resolves them to teams.
    """

    def __init__(self, id, stage, rivals):
        rivals = tuple(rivals)
        if not rivals:
            raise ValueError("A match needs at least one rival")
        self.id = id
        self.stage = stage
        self.rivals = rivals
        self.winner = None

    @property
    def is_bye(self):
        return len(self.rivals) == 1

    @property
    def is_resolved(self):
        return self.winner is not None

    def set_winner(self, team_id):
        if team_id not in self.rivals:
            raise TeamNotRival(self.id, team_id)
        if self.winner is not None:
            raise WinnerAlreadySet(self.id, self.winner)
        self.winner = team_id
        return self

    def view(self):
        return MatchView(id=self.id, stage=self.stage, rivals=self.rivals, winner=self.winner)

    def __repr__(self):
        return f"Match(id={self.id}, stage={self.stage}, rivals={list(self.rivals)}, winner={self.winner})"
