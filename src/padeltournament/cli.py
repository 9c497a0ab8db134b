"""Command-line interface for running a padel tournament.

This module provides the ``padel`` command. Every invocation opens the JSON
tournament file, performs one operation and saves it again.
"""

# Padel Tournament
# Copyright (C) 2025  Padel Tournament developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import sys
from typing import List, Optional

from padeltournament import __version__
from padeltournament.config import load_settings
from padeltournament.constants import (
    APP_NAME,
    EXIT_INTEGRITY_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USER_ERROR,
    FINAL_STAGE_ORDER,
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
)
from padeltournament.exceptions import PadelTournamentException, RecordNotFoundError
from padeltournament.storage import JsonFileStore
from padeltournament.tournament import Tournament
from padeltournament.utils import configure_logging, setup_logger
from padeltournament.utils.print import (
    format_assignment_grid,
    format_finals,
    format_matches,
    format_standings,
    format_table,
)

logger = setup_logger(__name__)


# ========== Parser ==========


def _add_command_parsers(subparsers) -> None:
    """Register every tournament command on ``subparsers``."""
    # Players
    player = subparsers.add_parser("player", help="Manage players")
    player_sub = player.add_subparsers(dest="action", required=True)
    p = player_sub.add_parser("add", help="Register a player")
    p.add_argument("name")
    player_sub.add_parser("list", help="List players")
    p = player_sub.add_parser("rename", help="Rename a player")
    p.add_argument("player_id", type=int)
    p.add_argument("name")
    p = player_sub.add_parser("delete", help="Delete a player")
    p.add_argument("player_id", type=int)

    # Teams
    team = subparsers.add_parser("team", help="Manage teams")
    team_sub = team.add_subparsers(dest="action", required=True)
    p = team_sub.add_parser("add", help="Form a team from two players")
    p.add_argument("player1_id", type=int)
    p.add_argument("player2_id", type=int)
    team_sub.add_parser("list", help="List teams")
    p = team_sub.add_parser("edit", help="Change a team's players")
    p.add_argument("team_id", type=int)
    p.add_argument("player1_id", type=int)
    p.add_argument("player2_id", type=int)
    p = team_sub.add_parser("delete", help="Delete a team")
    p.add_argument("team_id", type=int)

    # Groups
    group = subparsers.add_parser("group", help="Manage groups")
    group_sub = group.add_subparsers(dest="action", required=True)
    p = group_sub.add_parser("add", help="Create a group")
    p.add_argument("name")
    group_sub.add_parser("list", help="List groups")
    p = group_sub.add_parser("rename", help="Rename a group")
    p.add_argument("group_id", type=int)
    p.add_argument("name")
    p = group_sub.add_parser("delete", help="Delete a group and its assignments")
    p.add_argument("group_id", type=int)

    # Assignments
    for name, help_text in (
        ("assign", "Put a team into a group"),
        ("unassign", "Take a team out of a group"),
        ("toggle", "Toggle a team's membership of a group"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("group_id", type=int)
        p.add_argument("team_id", type=int)
    subparsers.add_parser("grid", help="Show the team assignment grid")

    # Group stage
    subparsers.add_parser(
        "start", help="Initialize standings and generate round-robin matches"
    )
    p = subparsers.add_parser("matches", help="List group matches")
    p.add_argument("--group", type=int, dest="group_id", help="Only this group id")
    p.add_argument(
        "--status",
        choices=[STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED],
        help="Only matches with this status",
    )
    p = subparsers.add_parser("begin", help="Mark a match as in progress")
    p.add_argument("match_id", type=int)
    p = subparsers.add_parser("score", help="Record a match result")
    p.add_argument("match_id", type=int)
    p.add_argument("team1_score", type=int)
    p.add_argument("team2_score", type=int)
    subparsers.add_parser("standings", help="Show ranked standings per group")
    p = subparsers.add_parser(
        "reset-standings", help="Delete all standings (and optionally matches)"
    )
    p.add_argument(
        "--matches", action="store_true", help="Also delete all group matches"
    )

    # Bracket
    final = subparsers.add_parser("final", help="Manage the bracket stage")
    final_sub = final.add_subparsers(dest="action", required=True)
    p = final_sub.add_parser("add", help="Create a bracket match")
    p.add_argument("type", choices=FINAL_STAGE_ORDER)
    p.add_argument("team1_id", type=int)
    p.add_argument("team2_id", type=int)
    p = final_sub.add_parser("score", help="Record a bracket result")
    p.add_argument("final_id", type=int)
    p.add_argument("team1_score", type=int)
    p.add_argument("team2_score", type=int)
    p = final_sub.add_parser("list", help="List bracket matches")
    p.add_argument("--type", choices=FINAL_STAGE_ORDER, dest="final_type")
    p = final_sub.add_parser("delete", help="Delete a bracket match")
    p.add_argument("final_id", type=int)

    subparsers.add_parser("summary", help="Show tournament counts")


def create_command_parser(prog: str = "padel") -> argparse.ArgumentParser:
    """Parser for tournament commands only (used by the interactive shell)."""
    parser = argparse.ArgumentParser(prog=prog, add_help=True)
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_command_parsers(subparsers)
    return parser


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="padel",
        description=f"{APP_NAME}: round-robin groups, standings and bracket",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  padel player add "Ana"
  padel team add 1 2
  padel group add "Group A"
  padel assign 1 1
  padel start
  padel score 1 6 3
  padel standings
""",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--data-file", help="Tournament file (overrides settings)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_command_parsers(subparsers)
    subparsers.add_parser("shell", help="Interactive mode with autocomplete")
    return parser


# ========== Command execution ==========


def _print_players(tournament: Tournament) -> None:
    rows = [[p.id, p.name] for p in tournament.roster.list_players()]
    print(format_table(["ID", "Name"], rows))


def _print_teams(tournament: Tournament) -> None:
    labels = tournament.roster.team_labels()
    assigned = {a.team_id: a.group_id for a in tournament.store.list_assignments()}
    group_names = {g.id: g.name for g in tournament.store.list_groups()}
    rows = [
        [t.id, labels[t.id], group_names.get(assigned.get(t.id), "")]
        for t in tournament.roster.list_teams()
    ]
    print(format_table(["ID", "Players", "Group"], rows))


def _print_groups(tournament: Tournament) -> None:
    rows = [
        [g.id, g.name, len(tournament.assignments.teams_by_group(g.id))]
        for g in tournament.roster.list_groups()
    ]
    print(format_table(["ID", "Name", "Teams"], rows))


def _run_player(tournament: Tournament, args: argparse.Namespace) -> None:
    roster = tournament.roster
    if args.action == "add":
        player = roster.add_player(args.name)
        print(f"Added player {player.id}: {player.name}")
    elif args.action == "rename":
        player = roster.rename_player(args.player_id, args.name)
        print(f"Renamed player {player.id} to {player.name}")
    elif args.action == "delete":
        roster.delete_player(args.player_id)
        print(f"Deleted player {args.player_id}")
    else:
        _print_players(tournament)


def _run_team(tournament: Tournament, args: argparse.Namespace) -> None:
    roster = tournament.roster
    if args.action == "add":
        team = roster.add_team(args.player1_id, args.player2_id)
        print(f"Added team {team.id}: {roster.team_label(team.id)}")
    elif args.action == "edit":
        team = roster.update_team(args.team_id, args.player1_id, args.player2_id)
        print(f"Updated team {team.id}: {roster.team_label(team.id)}")
    elif args.action == "delete":
        roster.delete_team(args.team_id)
        print(f"Deleted team {args.team_id}")
    else:
        _print_teams(tournament)


def _run_group(tournament: Tournament, args: argparse.Namespace) -> None:
    roster = tournament.roster
    if args.action == "add":
        group = roster.add_group(args.name)
        print(f"Added group {group.id}: {group.name}")
    elif args.action == "rename":
        group = roster.rename_group(args.group_id, args.name)
        print(f"Renamed group {group.id} to {group.name}")
    elif args.action == "delete":
        roster.delete_group(args.group_id)
        print(f"Deleted group {args.group_id}")
    else:
        _print_groups(tournament)


def _run_final(tournament: Tournament, args: argparse.Namespace) -> None:
    finals = tournament.finals
    if args.action == "add":
        final = finals.create_final(args.team1_id, args.team2_id, args.type)
        print(f"Created {final.type.display_name} match {final.id}")
    elif args.action == "score":
        final = finals.submit_score(args.final_id, args.team1_score, args.team2_score)
        label = tournament.roster.team_label(final.winner_id)
        print(f"Final {final.id}: {final.score_display()}, winner {label}")
    elif args.action == "delete":
        finals.delete_final(args.final_id)
        print(f"Deleted final {args.final_id}")
    else:
        stages = finals.finals_by_stage()
        if args.final_type:
            stages = {s: f for s, f in stages.items() if s.value == args.final_type}
        text = format_finals(stages, tournament.roster.team_labels())
        print(text or "No bracket matches yet.")


def execute(tournament: Tournament, args: argparse.Namespace) -> int:
    """Run one parsed command against ``tournament``.

    Returns:
        Exit code
    """
    command = args.command

    if command == "player":
        _run_player(tournament, args)
    elif command == "team":
        _run_team(tournament, args)
    elif command == "group":
        _run_group(tournament, args)
    elif command == "assign":
        tournament.assignments.assign(args.group_id, args.team_id)
        print(f"Assigned team {args.team_id} to group {args.group_id}")
    elif command == "unassign":
        if tournament.assignments.remove(args.group_id, args.team_id):
            print(f"Removed team {args.team_id} from group {args.group_id}")
        else:
            print(f"Team {args.team_id} is not in group {args.group_id}")
    elif command == "toggle":
        now_assigned = tournament.assignments.toggle(args.group_id, args.team_id)
        state = "assigned to" if now_assigned else "removed from"
        print(f"Team {args.team_id} {state} group {args.group_id}")
    elif command == "grid":
        print(format_assignment_grid(tournament.assignments.groups_with_teams()))
    elif command == "start":
        records, matches = tournament.start()
        print(f"Tournament started: {len(records)} standings, {len(matches)} matches")
    elif command == "matches":
        matches = tournament.matches.list_matches(args.group_id, args.status)
        group_names = {g.id: g.name for g in tournament.store.list_groups()}
        print(format_matches(matches, tournament.roster.team_labels(), group_names))
    elif command == "begin":
        match = tournament.matches.start_match(args.match_id)
        print(f"Match {match.id} is now {match.status.value}")
    elif command == "score":
        match = tournament.matches.submit_score(
            args.match_id, args.team1_score, args.team2_score
        )
        label = tournament.roster.team_label(match.winner_id)
        print(f"Match {match.id}: {match.score_display()}, winner {label}")
    elif command == "standings":
        labels = tournament.roster.team_labels()
        tables = [
            format_standings(group, rows, labels)
            for group, rows in tournament.standings()
        ]
        print("\n\n".join(tables) if tables else "Tournament not started yet.")
    elif command == "reset-standings":
        if args.matches:
            removed = tournament.reset_group_stage()
            print(
                f"Deleted {removed['standings']} standings and "
                f"{removed['matches']} matches"
            )
        else:
            print(f"Deleted {tournament.ledger.clear()} standings")
    elif command == "final":
        _run_final(tournament, args)
    elif command == "summary":
        rows = [[key, value] for key, value in tournament.summary().items()]
        print(format_table(["Item", "Value"], rows))
    else:
        raise ValueError(f"Unknown command: {command}")

    return EXIT_OK


def run_command(tournament: Tournament, args: argparse.Namespace) -> int:
    """Execute a command, turning tournament errors into exit codes."""
    try:
        return execute(tournament, args)
    except RecordNotFoundError as e:
        logger.critical(f"Integrity failure: {e}")
        print(f"Integrity error: {e}", file=sys.stderr)
        return EXIT_INTEGRITY_ERROR
    except PadelTournamentException as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USER_ERROR


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.data_file:
            settings.data_file = args.data_file
        configure_logging("DEBUG" if args.verbose else settings.log_level)

        tournament = Tournament(JsonFileStore(settings.data_file), settings)

        if args.command == "shell":
            from padeltournament.shell import run_interactive_mode

            return run_interactive_mode(tournament)
        return run_command(tournament, args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    except PadelTournamentException as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USER_ERROR


if __name__ == "__main__":
    sys.exit(main())
