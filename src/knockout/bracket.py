"""
Partitioning of the teams still in play into the matches of one stage.
"""
from typing import List, Sequence, Tuple


def partition_teams(team_ids: Sequence[str], min_rivals: int, max_rivals: int) -> Tuple[List[List[str]], List[str]]:
    """
    Split teams front to back into groups of up to ``max_rivals`` teams.

    Grouping continues while at least ``min_rivals`` teams remain. Returns
    ``(groups, leftovers)`` where leftovers are the trailing teams too few to
    form another group.

    Examples with min_rivals=2, max_rivals=2:
        [A, B, C, D] -> ([[A, B], [C, D]], [])
        [A, B, C]    -> ([[A, B]], [C])
    """
    remaining = list(team_ids)
    groups = []
    while remaining and len(remaining) >= min_rivals:
        size = min(max_rivals, len(remaining))
        groups.append(remaining[:size])
        remaining = remaining[size:]
    return groups, remaining


def plan_stage(team_ids: Sequence[str], min_rivals: int, max_rivals: int) -> Tuple[List[str], List[List[str]]]:
    """
    Decide byes and regular matches for one stage.

    Returns ``(byes, groups)``. Every leftover team gets a bye.

    Exception to the ``min_rivals`` limit: when no group can be formed at all
    but more than one team is still in play, those teams meet in a single
    match with fewer than ``min_rivals`` rivals. Otherwise they would get
    byes stage after stage and the pool would never produce a winner.
    """
    groups, leftovers = partition_teams(team_ids, min_rivals, max_rivals)
    if not groups and len(leftovers) > 1:
        return [], [leftovers]
    return leftovers, groups
