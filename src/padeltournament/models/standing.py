"""Standing record, pairing and ranking row data classes."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, NamedTuple, Optional


class Pairing(NamedTuple):
    """One round-robin fixture: two teams of the same group."""

    group_id: int
    team1_id: int
    team2_id: int


@dataclass
class StandingRecord:
    """Aggregate results of one team within one group.

    Attributes
    ----------
    group_id : int
        Group the record belongs to.
    team_id : int
        Team the record belongs to.
    matches_played : int
        Always ``matches_won + matches_lost``.
    matches_won, matches_lost : int
        Match tallies.
    games_won, games_lost : int
        Game tallies, only ever increase.
    id : int or None
        Store-assigned identifier.
    """

    group_id: int
    team_id: int
    matches_played: int = 0
    matches_won: int = 0
    matches_lost: int = 0
    games_won: int = 0
    games_lost: int = 0
    id: Optional[int] = None

    @property
    def game_difference(self) -> int:
        """Games won minus games lost, the first tie-break."""
        return self.games_won - self.games_lost

    def with_result(self, games_for: int, games_against: int) -> "StandingRecord":
        """Return a copy with one more match applied.

        The side with more games is credited the win. Match and game tallies
        are updated together on the copy, never on ``self``.
        """
        won = games_for > games_against
        return replace(
            self,
            matches_played=self.matches_played + 1,
            matches_won=self.matches_won + (1 if won else 0),
            matches_lost=self.matches_lost + (0 if won else 1),
            games_won=self.games_won + games_for,
            games_lost=self.games_lost + games_against,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "id": self.id,
            "group_id": self.group_id,
            "team_id": self.team_id,
            "matches_played": self.matches_played,
            "matches_won": self.matches_won,
            "matches_lost": self.matches_lost,
            "games_won": self.games_won,
            "games_lost": self.games_lost,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StandingRecord":
        """Deserialize standing from dictionary."""
        return cls(
            id=data.get("id"),
            group_id=data["group_id"],
            team_id=data["team_id"],
            matches_played=data.get("matches_played", 0),
            matches_won=data.get("matches_won", 0),
            matches_lost=data.get("matches_lost", 0),
            games_won=data.get("games_won", 0),
            games_lost=data.get("games_lost", 0),
        )


@dataclass(frozen=True)
class RankedRow:
    """A standing record placed in its group's table.

    Attributes:
        position: 1-based rank within the group
        record: The underlying standing record
        game_difference: games_won - games_lost, precomputed for display
    """

    position: int
    record: StandingRecord
    game_difference: int

    @property
    def team_id(self) -> int:
        return self.record.team_id
