"""Dictionary-backed tournament store."""

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

import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from padeltournament.constants import (
    ALL_TABLES,
    TABLE_ASSIGNMENTS,
    TABLE_FINALS,
    TABLE_GROUPS,
    TABLE_MATCHES,
    TABLE_PLAYERS,
    TABLE_STANDINGS,
    TABLE_TEAMS,
)
from padeltournament.exceptions import EntityNotFoundError
from padeltournament.models import (
    Assignment,
    FinalMatch,
    Group,
    Match,
    MatchStatus,
    Player,
    StandingRecord,
    Team,
)
from padeltournament.storage.base import TournamentStore
from padeltournament.utils import setup_logger

logger = setup_logger(__name__)

# Model class per table, used to rebuild rows from saved dictionaries
TABLE_MODELS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    TABLE_PLAYERS: Player.from_dict,
    TABLE_TEAMS: Team.from_dict,
    TABLE_GROUPS: Group.from_dict,
    TABLE_ASSIGNMENTS: Assignment.from_dict,
    TABLE_MATCHES: Match.from_dict,
    TABLE_FINALS: FinalMatch.from_dict,
    TABLE_STANDINGS: StandingRecord.from_dict,
}

ENTITY_NAMES = {
    TABLE_PLAYERS: "Player",
    TABLE_TEAMS: "Team",
    TABLE_GROUPS: "Group",
    TABLE_ASSIGNMENTS: "Assignment",
    TABLE_MATCHES: "Match",
    TABLE_FINALS: "Final",
    TABLE_STANDINGS: "Standing",
}


class InMemoryStore(TournamentStore):
    """Tournament store holding every table in process memory.

    Rows are dataclass instances keyed by id. Every read returns a copy and
    every write stores a copy, so callers can never mutate store state
    behind its back. All access goes through one re-entrant lock.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._depth = 0
        self._dirty = False
        self._tables: Dict[str, Dict[int, Any]] = {name: {} for name in ALL_TABLES}
        self._sequences: Dict[str, int] = {name: 0 for name in ALL_TABLES}

    # ========== Transactions ==========

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store lock for a block of reads and writes.

        Transactions nest. The outermost one takes a snapshot on entry; if
        its block raises, or saving afterwards fails, every table is put
        back to that snapshot before the error propagates.
        """
        with self._lock:
            snapshot = self._snapshot() if self._depth == 0 else None
            self._depth += 1
            try:
                yield
            except BaseException:
                self._depth -= 1
                if snapshot is not None:
                    self._restore(snapshot)
                raise
            self._depth -= 1
            if snapshot is not None and self._dirty:
                self._dirty = False
                try:
                    self._flush()
                except BaseException:
                    self._restore(snapshot)
                    raise

    def _snapshot(self) -> Tuple[Dict[str, Dict[int, Any]], Dict[str, int]]:
        # Rows are replaced on write, never mutated, so shallow copies suffice
        tables = {name: dict(rows) for name, rows in self._tables.items()}
        return tables, dict(self._sequences)

    def _restore(self, snapshot) -> None:
        tables, sequences = snapshot
        self._tables = tables
        self._sequences = sequences
        self._dirty = False

    def _flush(self) -> None:
        """Called once after the outermost transaction that changed data."""

    # ========== Generic table helpers ==========

    def _next_id(self, table: str) -> int:
        self._sequences[table] += 1
        return self._sequences[table]

    def _insert(self, table: str, row):
        with self.transaction():
            stored = replace(row, id=self._next_id(table))
            self._tables[table][stored.id] = stored
            self._dirty = True
            return replace(stored)

    def _get(self, table: str, row_id: int):
        with self.transaction():
            try:
                return replace(self._tables[table][row_id])
            except KeyError:
                raise EntityNotFoundError(ENTITY_NAMES[table], row_id) from None

    def _list(self, table: str, predicate=None, key=None) -> List[Any]:
        with self.transaction():
            rows = [replace(r) for r in self._tables[table].values()]
        if predicate is not None:
            rows = [r for r in rows if predicate(r)]
        return sorted(rows, key=key or (lambda r: r.id))

    def _update(self, table: str, row):
        with self.transaction():
            if row.id not in self._tables[table]:
                raise EntityNotFoundError(ENTITY_NAMES[table], row.id)
            self._tables[table][row.id] = replace(row)
            self._dirty = True
            return replace(row)

    def _delete(self, table: str, row_id: int) -> None:
        with self.transaction():
            if self._tables[table].pop(row_id, None) is None:
                raise EntityNotFoundError(ENTITY_NAMES[table], row_id)
            self._dirty = True

    def _clear(self, table: str) -> int:
        with self.transaction():
            count = len(self._tables[table])
            self._tables[table].clear()
            if count:
                self._dirty = True
            return count

    # ========== Players ==========

    def add_player(self, player: Player) -> Player:
        return self._insert(TABLE_PLAYERS, player)

    def get_player(self, player_id: int) -> Player:
        return self._get(TABLE_PLAYERS, player_id)

    def list_players(self) -> List[Player]:
        return self._list(TABLE_PLAYERS)

    def update_player(self, player: Player) -> Player:
        return self._update(TABLE_PLAYERS, player)

    def delete_player(self, player_id: int) -> None:
        self._delete(TABLE_PLAYERS, player_id)

    # ========== Teams ==========

    def add_team(self, team: Team) -> Team:
        return self._insert(TABLE_TEAMS, team)

    def get_team(self, team_id: int) -> Team:
        return self._get(TABLE_TEAMS, team_id)

    def list_teams(self) -> List[Team]:
        return self._list(TABLE_TEAMS)

    def update_team(self, team: Team) -> Team:
        return self._update(TABLE_TEAMS, team)

    def delete_team(self, team_id: int) -> None:
        self._delete(TABLE_TEAMS, team_id)

    # ========== Groups ==========

    def add_group(self, group: Group) -> Group:
        return self._insert(TABLE_GROUPS, group)

    def get_group(self, group_id: int) -> Group:
        return self._get(TABLE_GROUPS, group_id)

    def list_groups(self) -> List[Group]:
        return self._list(TABLE_GROUPS)

    def update_group(self, group: Group) -> Group:
        return self._update(TABLE_GROUPS, group)

    def delete_group(self, group_id: int) -> None:
        self._delete(TABLE_GROUPS, group_id)

    # ========== Assignments ==========

    def add_assignment(self, assignment: Assignment) -> Assignment:
        return self._insert(TABLE_ASSIGNMENTS, assignment)

    def delete_assignment(self, group_id: int, team_id: int) -> bool:
        with self.transaction():
            for row in list(self._tables[TABLE_ASSIGNMENTS].values()):
                if row.group_id == group_id and row.team_id == team_id:
                    del self._tables[TABLE_ASSIGNMENTS][row.id]
                    self._dirty = True
                    return True
            return False

    def list_assignments(self) -> List[Assignment]:
        return self._list(TABLE_ASSIGNMENTS, key=lambda a: (a.group_id, a.id))

    # ========== Standings ==========

    def list_standing_records(
        self, group_id: Optional[int] = None
    ) -> List[StandingRecord]:
        predicate = None if group_id is None else (lambda r: r.group_id == group_id)
        return self._list(TABLE_STANDINGS, predicate, key=lambda r: (r.group_id, r.id))

    def create_standing_records(
        self, records: Iterable[StandingRecord]
    ) -> List[StandingRecord]:
        with self.transaction():
            return [self._insert(TABLE_STANDINGS, record) for record in records]

    def update_standing_records(self, records: Iterable[StandingRecord]) -> None:
        records = list(records)
        with self.transaction():
            # Check every id first so a bad id leaves all records untouched
            for record in records:
                if record.id not in self._tables[TABLE_STANDINGS]:
                    raise EntityNotFoundError("Standing", record.id)
            for record in records:
                self._tables[TABLE_STANDINGS][record.id] = replace(record)
            if records:
                self._dirty = True

    def clear_standing_records(self) -> int:
        return self._clear(TABLE_STANDINGS)

    # ========== Matches ==========

    def create_matches(self, matches: Iterable[Match]) -> List[Match]:
        with self.transaction():
            return [self._insert(TABLE_MATCHES, match) for match in matches]

    def get_match(self, match_id: int) -> Match:
        return self._get(TABLE_MATCHES, match_id)

    def list_matches(
        self, group_id: Optional[int] = None, status: Optional[MatchStatus] = None
    ) -> List[Match]:
        def predicate(match: Match) -> bool:
            if group_id is not None and match.group_id != group_id:
                return False
            return status is None or match.status == status

        return self._list(TABLE_MATCHES, predicate, key=lambda m: (m.group_id, m.id))

    def update_match(self, match: Match) -> Match:
        return self._update(TABLE_MATCHES, match)

    def delete_matches(self) -> int:
        return self._clear(TABLE_MATCHES)

    # ========== Finals ==========

    def add_final(self, final: FinalMatch) -> FinalMatch:
        return self._insert(TABLE_FINALS, final)

    def get_final(self, final_id: int) -> FinalMatch:
        return self._get(TABLE_FINALS, final_id)

    def list_finals(self) -> List[FinalMatch]:
        return self._list(TABLE_FINALS)

    def update_final(self, final: FinalMatch) -> FinalMatch:
        return self._update(TABLE_FINALS, final)

    def delete_final(self, final_id: int) -> None:
        self._delete(TABLE_FINALS, final_id)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize every table and id sequence to a dictionary."""
        with self.transaction():
            data: Dict[str, Any] = {
                table: [row.to_dict() for row in self._list(table)]
                for table in ALL_TABLES
            }
            data["sequences"] = dict(self._sequences)
        return data

    def load_dict(self, data: Dict[str, Any]) -> None:
        """Replace the store contents with previously serialized data."""
        tables: Dict[str, Dict[int, Any]] = {}
        sequences: Dict[str, int] = {}
        for table in ALL_TABLES:
            rows = [TABLE_MODELS[table](raw) for raw in data.get(table, [])]
            tables[table] = {row.id: row for row in rows}
            highest = max(tables[table], default=0)
            sequences[table] = max(data.get("sequences", {}).get(table, 0), highest)

        with self.transaction():
            self._tables = tables
            self._sequences = sequences
        logger.debug(
            "Loaded store: "
            + ", ".join(f"{t}={len(rows)}" for t, rows in tables.items())
        )
