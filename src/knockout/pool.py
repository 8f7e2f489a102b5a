"""
Single elimination pool: team registration, stage-by-stage bracket
generation and winner tracking.
"""
import logging
from typing import List, Optional

from knockout.bracket import plan_stage
from knockout.errors import (
    BelowMinimumTeams,
    DuplicateTeam,
    InternalInconsistency,
    MatchNotFound,
    PoolAlreadyEnded,
    PoolAlreadyStarted,
    PoolNotStarted,
    TeamNotFound,
    TooManyTeams,
)
from knockout.events import (
    MATCH_SCHEDULED,
    POOL_ENDED,
    STAGE_SCHEDULED,
    TEAM_COMPLETED,
    PoolEvents,
)
from knockout.models import Match, MatchView, Team, TeamView
from knockout.settings import PoolSettings

logger = logging.getLogger(__name__)

FIRST_STAGE = 1

FORMING = 'forming'
STARTED = 'started'
ENDED = 'ended'


def stage_winners(matches) -> List[str]:
    """Winners of a finished stage's matches, in match order."""
    winners = []
    for match in matches:
        if match.winner is None:
            raise InternalInconsistency(f"Match '{match.id}' at stage {match.stage} has no winner")
        winners.append(match.winner)
    return winners


class Pool:
    """
    Orchestrates one elimination pool from team registration to a single winner.

    The pool owns every Team and Match. Matches refer to teams by id, and
    callers only ever receive TeamView / MatchView snapshots, so nothing
    outside the pool can mutate its state.

    Lifecycle: forming -> started -> ended.
    """

    def __init__(self, settings: PoolSettings, events: Optional[PoolEvents] = None):
        self._settings = settings
        self._events = events if events is not None else PoolEvents()
        self._teams = {}  # team_id -> Team, registration order
        self._matches = []  # creation order, never pruned
        self._matches_by_id = {}
        self._stage = FIRST_STAGE
        self._started = False
        self._ended = False
        self._winner_id = None

    # Read-only so observers handed the pool cannot rewrite its progress.
    @property
    def settings(self) -> PoolSettings:
        return self._settings

    @property
    def events(self) -> PoolEvents:
        return self._events

    @property
    def stage(self):
        return self._stage

    @property
    def started(self):
        return self._started

    @property
    def ended(self):
        return self._ended

    @property
    def winner_id(self):
        return self._winner_id

    @property
    def state(self):
        if self.ended:
            return ENDED
        if self.started:
            return STARTED
        return FORMING

    # ------------------------------------------------------------------
    # Forming
    # ------------------------------------------------------------------
    def add_team(self, team_id) -> TeamView:
        self._ensure_forming()
        maximum = self.settings.teams_in_pool.max
        if len(self._teams) >= maximum:
            raise TooManyTeams(maximum)
        if team_id in self._teams:
            raise DuplicateTeam(team_id)

        team = Team(team_id, self.settings.players_per_team)
        self._teams[team_id] = team
        logger.debug(f"Team {team_id} registered ({len(self._teams)}/{maximum})")
        return team.view()

    def add_member_to_team(self, team_id, user_id) -> TeamView:
        self._ensure_forming()
        team = self._find_team(team_id)
        team.add_member(user_id)
        logger.debug(f"User {user_id} joined team {team_id} ({len(team.members)}/{team.capacity})")
        if team.is_complete():
            self._team_completed(team)
        return team.view()

    def add_members_to_team(self, team_id, user_ids) -> TeamView:
        """Add several users at once. Either all of them join or none do."""
        self._ensure_forming()
        team = self._find_team(team_id)
        was_complete = team.is_complete()
        team.add_members(user_ids)
        logger.debug(f"Team {team_id} now has {len(team.members)}/{team.capacity} members")
        if team.is_complete() and not was_complete:
            self._team_completed(team)
        return team.view()

    def start(self) -> List[MatchView]:
        """
        Close registration and schedule the first stage.

        Incomplete teams are dropped. Returns the first stage's matches.
        """
        self._ensure_forming()
        complete = {team_id: team for team_id, team in self._teams.items() if team.is_complete()}
        minimum = self.settings.teams_in_pool.min
        if len(complete) < minimum:
            raise BelowMinimumTeams(len(complete), minimum)

        discarded = [team_id for team_id in self._teams if team_id not in complete]
        if discarded:
            logger.warning(f"Discarding incomplete teams: {', '.join(map(str, discarded))}")

        self._teams = complete
        self._started = True
        logger.info(f"Pool started with {len(complete)} teams")

        self._schedule_stage(list(complete))
        self._end_or_next()
        return self.matches(stage=FIRST_STAGE)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def set_match_winner(self, match_id, team_id) -> MatchView:
        """
        Record the winner of a match and advance the pool.

        Once every match of the current stage has a winner, either the pool
        ends (the stage had a single match) or the next stage is scheduled.
        """
        if self.ended:
            raise PoolAlreadyEnded()
        if not self.started:
            raise PoolNotStarted()

        match = self._find_match(match_id)
        match.set_winner(team_id)
        self._teams[team_id].advance_round()
        logger.debug(f"Team {team_id} won match {match_id} (stage {match.stage})")

        self._end_or_next()
        return match.view()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get_team_by_id(self, team_id) -> TeamView:
        return self._find_team(team_id).view()

    def get_match_by_id(self, match_id) -> MatchView:
        return self._find_match(match_id).view()

    def get_winner_id(self):
        return self.winner_id

    def teams(self) -> List[TeamView]:
        return [team.view() for team in self._teams.values()]

    def matches(self, stage=None) -> List[MatchView]:
        return [match.view() for match in self._matches if stage is None or match.stage == stage]

    def pending_matches(self) -> List[MatchView]:
        return [match.view() for match in self._matches if not match.is_resolved]

    def last_ended_stage(self):
        """The current stage if all of its matches have winners, else the one before."""
        if all(match.is_resolved for match in self._stage_matches(self.stage)):
            return self.stage
        return self.stage - 1

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _ensure_forming(self):
        if self.ended:
            raise PoolAlreadyEnded()
        if self.started:
            raise PoolAlreadyStarted()

    def _find_team(self, team_id):
        try:
            return self._teams[team_id]
        except KeyError:
            raise TeamNotFound(team_id) from None

    def _find_match(self, match_id):
        try:
            return self._matches_by_id[match_id]
        except KeyError:
            raise MatchNotFound(match_id) from None

    def _stage_matches(self, stage):
        return [match for match in self._matches if match.stage == stage]

    def _team_completed(self, team):
        logger.info(f"Team {team.id} is complete")
        self.events.emit(TEAM_COMPLETED, team.view())

    def _check_winner(self):
        if not self.started:
            return None
        last_matches = self._stage_matches(self.last_ended_stage())
        if len(last_matches) != 1:
            return None
        return last_matches[0].winner

    def _end_or_next(self):
        # Byes can resolve a whole stage on creation, so keep going until the
        # pool ends or a stage is waiting on results.
        while True:
            winner_id = self._check_winner()
            if winner_id is not None:
                self._end(winner_id)
                return
            if not all(match.is_resolved for match in self._stage_matches(self.stage)):
                return
            winners = stage_winners(self._stage_matches(self.stage))
            self._stage += 1
            self._schedule_stage(winners)

    def _end(self, winner_id):
        self._winner_id = winner_id
        self._ended = True
        logger.info(f"Pool ended at stage {self.stage}, winner: {winner_id}")
        self.events.emit(POOL_ENDED, self)

    def _create_match(self, rivals):
        match = Match(f"m{len(self._matches) + 1}", self.stage, rivals)
        self._matches.append(match)
        self._matches_by_id[match.id] = match
        return match

    def _schedule_stage(self, team_ids):
        limits = self.settings.teams_in_match
        byes, groups = plan_stage(team_ids, limits.min, limits.max)

        # The whole stage exists before any subscriber runs, so a failing
        # subscriber cannot leave it half built.
        scheduled = []
        for team_id in byes:
            match = self._create_match([team_id])
            match.set_winner(team_id)
            logger.debug(f"Team {team_id} gets a bye at stage {self.stage}")
            scheduled.append(match)

        for group in groups:
            match = self._create_match(group)
            logger.debug(f"Scheduled match {match.id}: {' vs '.join(map(str, group))}")
            scheduled.append(match)

        logger.info(f"Stage {self.stage} scheduled: {len(groups)} matches, {len(byes)} byes")
        views = [match.view() for match in scheduled]
        for view in views:
            self.events.emit(MATCH_SCHEDULED, view)
        self.events.emit(STAGE_SCHEDULED, views)
        return scheduled

    def __repr__(self):
        return (f"Pool(state={self.state}, stage={self.stage}, teams={len(self._teams)}, "
                f"matches={len(self._matches)}, winner_id={self.winner_id})")
