"""Abstract persistence interface for tournament data.

The computation core never talks to a concrete database. Services receive a
:class:`TournamentStore` and use only the operations declared here, so the
same code runs against the in-memory store in tests and the JSON file store
in the command line tool.
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

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import ContextManager, Iterable, List, Optional

from padeltournament.exceptions import DuplicateResultError
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
from padeltournament.utils import utc_now


class TournamentStore(ABC):
    """Key-based access to players, teams, groups, matches and standings.

    Implementations must:
    - assign ids on insert and return copies, never live internal objects
    - raise :class:`EntityNotFoundError` for unknown ids on get/update/delete
    - make :meth:`transaction` re-entrant and exclusive, so a block of
      operations is observed by other threads either entirely or not at all
    """

    # ========== Transactions ==========

    @abstractmethod
    def transaction(self) -> ContextManager[None]:
        """Hold the store exclusively for the duration of a ``with`` block."""

    # ========== Players ==========

    @abstractmethod
    def add_player(self, player: Player) -> Player: ...

    @abstractmethod
    def get_player(self, player_id: int) -> Player: ...

    @abstractmethod
    def list_players(self) -> List[Player]: ...

    @abstractmethod
    def update_player(self, player: Player) -> Player: ...

    @abstractmethod
    def delete_player(self, player_id: int) -> None: ...

    # ========== Teams ==========

    @abstractmethod
    def add_team(self, team: Team) -> Team: ...

    @abstractmethod
    def get_team(self, team_id: int) -> Team: ...

    @abstractmethod
    def list_teams(self) -> List[Team]: ...

    @abstractmethod
    def update_team(self, team: Team) -> Team: ...

    @abstractmethod
    def delete_team(self, team_id: int) -> None: ...

    # ========== Groups ==========

    @abstractmethod
    def add_group(self, group: Group) -> Group: ...

    @abstractmethod
    def get_group(self, group_id: int) -> Group: ...

    @abstractmethod
    def list_groups(self) -> List[Group]: ...

    @abstractmethod
    def update_group(self, group: Group) -> Group: ...

    @abstractmethod
    def delete_group(self, group_id: int) -> None: ...

    # ========== Assignments ==========

    @abstractmethod
    def add_assignment(self, assignment: Assignment) -> Assignment: ...

    @abstractmethod
    def delete_assignment(self, group_id: int, team_id: int) -> bool:
        """Remove an assignment; return False if it did not exist."""

    @abstractmethod
    def list_assignments(self) -> List[Assignment]:
        """All assignments ordered by group id, then insertion."""

    def find_assignment(self, team_id: int) -> Optional[Assignment]:
        """Return the assignment holding ``team_id``, if any."""
        for assignment in self.list_assignments():
            if assignment.team_id == team_id:
                return assignment
        return None

    # ========== Standings ==========

    @abstractmethod
    def list_standing_records(
        self, group_id: Optional[int] = None
    ) -> List[StandingRecord]: ...

    @abstractmethod
    def create_standing_records(
        self, records: Iterable[StandingRecord]
    ) -> List[StandingRecord]: ...

    @abstractmethod
    def update_standing_records(self, records: Iterable[StandingRecord]) -> None:
        """Replace every given record (matched by id) in one atomic step."""

    @abstractmethod
    def clear_standing_records(self) -> int:
        """Delete every standing record and return how many were removed."""

    # ========== Matches ==========

    @abstractmethod
    def create_matches(self, matches: Iterable[Match]) -> List[Match]: ...

    @abstractmethod
    def get_match(self, match_id: int) -> Match: ...

    @abstractmethod
    def list_matches(
        self, group_id: Optional[int] = None, status: Optional[MatchStatus] = None
    ) -> List[Match]:
        """Matches ordered by group id, then creation."""

    @abstractmethod
    def update_match(self, match: Match) -> Match: ...

    @abstractmethod
    def delete_matches(self) -> int: ...

    def complete_match(
        self, match_id: int, team1_score: int, team2_score: int, winner_id: int
    ) -> Match:
        """Record a result, gated on the match not being completed yet.

        The status check and the write happen inside one transaction, so of
        two concurrent submissions for the same match exactly one succeeds.

        Raises:
            DuplicateResultError: If the match is already completed
        """
        with self.transaction():
            match = self.get_match(match_id)
            if match.is_completed:
                raise DuplicateResultError(f"Match {match_id} is already completed")
            completed = replace(
                match,
                team1_score=team1_score,
                team2_score=team2_score,
                winner_id=winner_id,
                status=MatchStatus.COMPLETED,
                updated_at=utc_now(),
            )
            return self.update_match(completed)

    def reopen_match(self, match: Match) -> Match:
        """Restore a match to the given pre-completion snapshot."""
        with self.transaction():
            return self.update_match(replace(match, updated_at=utc_now()))

    # ========== Finals ==========

    @abstractmethod
    def add_final(self, final: FinalMatch) -> FinalMatch: ...

    @abstractmethod
    def get_final(self, final_id: int) -> FinalMatch: ...

    @abstractmethod
    def list_finals(self) -> List[FinalMatch]: ...

    @abstractmethod
    def update_final(self, final: FinalMatch) -> FinalMatch: ...

    @abstractmethod
    def delete_final(self, final_id: int) -> None: ...

    def complete_final(
        self, final_id: int, team1_score: int, team2_score: int, winner_id: int
    ) -> FinalMatch:
        """Record a bracket result, gated like :meth:`complete_match`.

        Raises:
            DuplicateResultError: If the final already has a score
        """
        with self.transaction():
            final = self.get_final(final_id)
            if final.is_completed:
                raise DuplicateResultError(f"Final {final_id} is already completed")
            completed = replace(
                final,
                team1_score=team1_score,
                team2_score=team2_score,
                winner_id=winner_id,
                updated_at=utc_now(),
            )
            return self.update_final(completed)
