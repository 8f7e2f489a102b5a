# Entry point of the demo: plays a whole pool from YAML files and prints every event

import argparse
import logging
import os
import sys

import yaml

from knockout import Pool, PoolError, load_settings


def load_teams(file_path):
    """Read a mapping of team id -> list of member ids."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        teams_data = yaml.safe_load(file) or {}
    teams = {}
    for team_id, members in teams_data.items():
        teams[str(team_id)] = [str(member) for member in (members or [])]
    return teams


def load_results(file_path):
    """Read the ordered list of winning team ids."""
    with open(file_path, mode='r', encoding='utf-8') as file:
        results = yaml.safe_load(file) or []
    return [str(team_id) for team_id in results]


def wire_printers(pool, out=None):
    if out is None:
        out = sys.stdout

    @pool.events.on_team_completed
    def print_team_completed(team):
        print(f"Team {team.id} has been completed", file=out)

    @pool.events.on_match_scheduled
    def print_match_scheduled(match):
        if match.is_bye:
            print(f"Team {match.rivals[0]} gets a bye in match {match.id}", file=out)
        else:
            print(f"Teams {', '.join(match.rivals)} in match {match.id}", file=out)

    @pool.events.on_stage_scheduled
    def print_stage_scheduled(matches):
        if matches:
            ids = ', '.join(match.id for match in matches)
            print(f"Stage {matches[0].stage}: matches {ids}", file=out)

    @pool.events.on_pool_ended
    def print_pool_ended(ended_pool):
        print(f"Pool has ended. Winner: {ended_pool.get_winner_id()}", file=out)


def play(pool, results, out=None):
    """
    Resolve pending matches stage by stage from the ordered list of winners.

    Each pending match takes the first unused winner that is one of its rivals.
    Returns True once the pool has ended.
    """
    if out is None:
        out = sys.stdout
    remaining = list(results)
    while not pool.ended:
        pending = pool.pending_matches()
        progressed = False
        for match in pending:
            winner = next((team_id for team_id in remaining if team_id in match.rivals), None)
            if winner is None:
                print(f"No result given for match {match.id} ({' vs '.join(match.rivals)})", file=out)
                continue
            remaining.remove(winner)
            pool.set_match_winner(match.id, winner)
            progressed = True
            if pool.ended:
                break
        if not progressed:
            return False
    return True


def main(argv=None):
    script_dir = os.path.dirname(__file__)
    base_dir = os.path.dirname(script_dir)
    data_dir = os.path.join(base_dir, 'data')

    parser = argparse.ArgumentParser(description='Play an elimination pool from YAML files.')
    parser.add_argument('--settings', default=os.path.join(data_dir, 'pool.yaml'))
    parser.add_argument('--teams', default=os.path.join(data_dir, 'teams.yaml'))
    parser.add_argument('--results', default=os.path.join(data_dir, 'results.yaml'))
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        settings = load_settings(args.settings)
        teams = load_teams(args.teams)
        results = load_results(args.results)
    except (OSError, yaml.YAMLError, PoolError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not teams:
        print(f"No teams loaded. Check {args.teams}", file=sys.stderr)
        return 1

    pool = Pool(settings)
    wire_printers(pool)

    try:
        for team_id, members in teams.items():
            pool.add_team(team_id)
            pool.add_members_to_team(team_id, members)
        pool.start()
        finished = play(pool, results)
    except PoolError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not finished:
        print("Pool did not finish: not enough results.", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
