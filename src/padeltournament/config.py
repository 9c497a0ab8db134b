"""TournamentSettings data class and settings loading."""

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

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from padeltournament.constants import (
    DEFAULT_DATA_FILE,
    DEFAULT_TOURNAMENT_NAME,
    ENV_DATA_FILE,
    ENV_LOG_LEVEL,
    MIN_GAMES_TO_WIN,
)
from padeltournament.exceptions import (
    InvalidConfigurationException,
    MissingConfigurationException,
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TournamentSettings:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    min_games_to_win : int
        Games a side needs for a score to count as a finished set.
    data_file : str
        Path of the JSON file the tournament is stored in.
    log_level : str
        Logging level name for the command line tool.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    min_games_to_win: int = MIN_GAMES_TO_WIN
    data_file: str = DEFAULT_DATA_FILE
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if (
            isinstance(self.min_games_to_win, bool)
            or not isinstance(self.min_games_to_win, int)
            or self.min_games_to_win < 1
        ):
            raise InvalidConfigurationException(
                f"min_games_to_win must be a positive integer: {self.min_games_to_win!r}"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise InvalidConfigurationException(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}: {self.log_level}"
            )
        if not str(self.data_file).strip():
            raise InvalidConfigurationException("data_file cannot be empty")

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "name": self.name,
            "min_games_to_win": self.min_games_to_win,
            "data_file": self.data_file,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize settings from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            min_games_to_win=data.get("min_games_to_win", MIN_GAMES_TO_WIN),
            data_file=data.get("data_file", DEFAULT_DATA_FILE),
            log_level=data.get("log_level", "INFO"),
        )


def load_settings(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> TournamentSettings:
    """Build settings from an optional JSON file plus environment overrides.

    Args:
        path: JSON settings file; must exist when given
        environ: Environment mapping, ``os.environ`` by default

    Raises:
        MissingConfigurationException: If ``path`` does not exist
        InvalidConfigurationException: If the file or a value is invalid
    """
    environ = os.environ if environ is None else environ
    data: Dict[str, Any] = {}

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise MissingConfigurationException(f"Settings file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidConfigurationException(
                f"Could not read settings from {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Settings file {path} must contain a JSON object"
            )

    if environ.get(ENV_DATA_FILE):
        data["data_file"] = environ[ENV_DATA_FILE]
    if environ.get(ENV_LOG_LEVEL):
        data["log_level"] = environ[ENV_LOG_LEVEL]

    return TournamentSettings.from_dict(data)
