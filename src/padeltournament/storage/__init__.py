"""Persistence layer for Padel Tournament.

This package defines the store interface the tournament core depends on and
ships two implementations: an in-memory store and a JSON file store.
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

from padeltournament.storage.base import TournamentStore
from padeltournament.storage.json_store import JsonFileStore
from padeltournament.storage.memory import InMemoryStore

__all__ = [
    "TournamentStore",
    "InMemoryStore",
    "JsonFileStore",
]
