"""Tournament store persisted to a JSON file."""

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
import os
from pathlib import Path
from typing import Union

from padeltournament.exceptions import (
    FileLoadException,
    FileSaveException,
    ValidationError,
)
from padeltournament.storage.memory import InMemoryStore
from padeltournament.utils import setup_logger

logger = setup_logger(__name__)

SAVE_FORMAT_VERSION = 1


class JsonFileStore(InMemoryStore):
    """In-memory store that writes itself to ``path`` after every change.

    The file is read once at construction. A missing file starts an empty
    tournament; it is created on the first write. Writes go to a temporary
    sibling file that is then renamed over the target, so a crash never
    leaves a half-written save.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__()
        self.path = Path(path)
        if self.path.exists():
            self._load()
        else:
            logger.info(f"No tournament file at {self.path}, starting empty")

    def _load(self) -> None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Could not load {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise FileLoadException(f"Could not load {self.path}: not a tournament file")

        version = data.get("version", SAVE_FORMAT_VERSION)
        if version != SAVE_FORMAT_VERSION:
            raise FileLoadException(
                f"Unsupported save format version {version} in {self.path}"
            )

        try:
            self.load_dict(data)
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise FileLoadException(f"Corrupt tournament file {self.path}: {e}") from e
        logger.info(f"Loaded tournament from {self.path}")

    def _flush(self) -> None:
        data = self.to_dict()
        data["version"] = SAVE_FORMAT_VERSION
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            if self.path.parent and not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise FileSaveException(f"Could not save {self.path}: {e}") from e
        logger.debug(f"Tournament saved to {self.path}")
