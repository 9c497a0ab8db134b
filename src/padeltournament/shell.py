"""Interactive tournament shell with autocomplete.

Usage:
    padel shell

Commands are the same as on the command line, without the ``padel``
prefix; changes are saved after every command.
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

import shlex
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from padeltournament.cli import create_command_parser, run_command
from padeltournament.constants import EXIT_OK, FINAL_STAGE_ORDER
from padeltournament.tournament import Tournament
from padeltournament.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions for autocomplete and help
COMMANDS = {
    "player": {
        "description": "Manage players",
        "options": {
            "add": "add NAME",
            "list": "list",
            "rename": "rename ID NAME",
            "delete": "delete ID",
        },
    },
    "team": {
        "description": "Manage teams",
        "options": {
            "add": "add PLAYER1 PLAYER2",
            "list": "list",
            "edit": "edit ID PLAYER1 PLAYER2",
            "delete": "delete ID",
        },
    },
    "group": {
        "description": "Manage groups",
        "options": {
            "add": "add NAME",
            "list": "list",
            "rename": "rename ID NAME",
            "delete": "delete ID",
        },
    },
    "assign": {"description": "assign GROUP TEAM", "options": {}},
    "unassign": {"description": "unassign GROUP TEAM", "options": {}},
    "toggle": {"description": "toggle GROUP TEAM", "options": {}},
    "grid": {"description": "Show the team assignment grid", "options": {}},
    "start": {"description": "Start the group stage", "options": {}},
    "matches": {
        "description": "List group matches",
        "options": {
            "--group": "Only this group id",
            "--status": "pending/in_progress/completed",
        },
    },
    "begin": {"description": "begin MATCH (mark in progress)", "options": {}},
    "score": {"description": "score MATCH TEAM1_GAMES TEAM2_GAMES", "options": {}},
    "standings": {"description": "Show ranked standings", "options": {}},
    "reset-standings": {
        "description": "Delete all standings",
        "options": {"--matches": "Also delete group matches"},
    },
    "final": {
        "description": "Manage the bracket stage",
        "options": {
            "add": f"add {{{','.join(FINAL_STAGE_ORDER)}}} TEAM1 TEAM2",
            "score": "score ID TEAM1_GAMES TEAM2_GAMES",
            "list": "list [--type TYPE]",
            "delete": "delete ID",
        },
    },
    "summary": {"description": "Show tournament counts", "options": {}},
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner(tournament: Tournament):
    """Print the shell banner."""
    print(
        f"\n{Colors.OKBLUE}{Colors.BOLD}{tournament.name}{Colors.ENDC}\n\n"
        f"Type {Colors.BOLD}help{Colors.ENDC} to see all available commands\n"
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} "
        f"to leave interactive mode\n"
    )


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:16}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")
    if cmd_info["options"]:
        print(f"{Colors.BOLD}Usage:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:12}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd, info in COMMANDS.items():
        completions[cmd] = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
    completions["help"] = WordCompleter(list(COMMANDS.keys()))
    return NestedCompleter.from_nested_dict(completions)


def handle_line(tournament: Tournament, line: str) -> Optional[int]:
    """Execute one line of shell input.

    Returns:
        The command's exit code, or ``None`` when the line was a meta
        command (help), blank, or could not be parsed
    """
    line = line.strip()
    if not line:
        return None

    if line in ("help", "?"):
        print_commands_list()
        return None
    if line.startswith("help "):
        print_command_help(line.split()[1])
        return None

    try:
        parts = shlex.split(line)
    except ValueError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return None

    if parts[0] not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {parts[0]}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
        return None

    parser = create_command_parser(prog="")
    try:
        args = parser.parse_args(parts)
    except SystemExit:
        # argparse calls sys.exit on error, catch it
        return None
    return run_command(tournament, args)


def run_interactive_mode(tournament: Tournament) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner(tournament)

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("padel> ").strip()

            if user_input in ("exit", "quit", "q"):
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            handle_line(tournament, user_input)

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return EXIT_OK
