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

# --- Constants ---
APP_NAME = "Padel Tournament"
SAVE_FILE_EXTENSION = ".json"
DEFAULT_DATA_FILE = f"padel_tournament{SAVE_FILE_EXTENSION}"
DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# Set scoring: a set is won by the first side to reach six games
MIN_GAMES_TO_WIN = 6

# Match status values
STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"

# Bracket stages, in play order
FINAL_QUARTER = "quarter"
FINAL_SEMIS = "semis"
FINAL_FINAL = "final"

FINAL_STAGE_ORDER = [FINAL_QUARTER, FINAL_SEMIS, FINAL_FINAL]

# Default display names for bracket stages
FINAL_STAGE_NAMES = {
    FINAL_QUARTER: "Quarterfinals",
    FINAL_SEMIS: "Semifinals",
    FINAL_FINAL: "Final",
}

# Store table names (also the top-level keys of the JSON save file)
TABLE_PLAYERS = "players"
TABLE_TEAMS = "teams"
TABLE_GROUPS = "groups"
TABLE_ASSIGNMENTS = "group_teams"
TABLE_MATCHES = "matches"
TABLE_FINALS = "finals"
TABLE_STANDINGS = "standings"

ALL_TABLES = [
    TABLE_PLAYERS,
    TABLE_TEAMS,
    TABLE_GROUPS,
    TABLE_ASSIGNMENTS,
    TABLE_MATCHES,
    TABLE_FINALS,
    TABLE_STANDINGS,
]

# Environment overrides for settings
ENV_DATA_FILE = "PADEL_DATA_FILE"
ENV_LOG_LEVEL = "PADEL_LOG_LEVEL"

# CLI exit codes
EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_INTEGRITY_ERROR = 3
EXIT_INTERRUPTED = 130
