"""Team data class: a pair of two distinct players."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, FrozenSet, Optional

from padeltournament.utils import format_timestamp, parse_timestamp, utc_now
from padeltournament.utils.validation import validate_distinct


@dataclass
class Team:
    """A doubles team.

    The two player slots are unordered for identity purposes (see
    :attr:`player_ids`) but keep their entry order for display.

    Attributes
    ----------
    player1_id : int
        First player.
    player2_id : int
        Second player, never equal to ``player1_id``.
    id : int or None
        Store-assigned identifier.
    created_at : datetime
        Creation time (UTC).

    Raises
    ------
    ValidationError
        If both slots name the same player.
    """

    player1_id: int
    player2_id: int
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        validate_distinct(
            self.player1_id, self.player2_id, "Player 1", "Player 2"
        ).raise_if_invalid()

    @property
    def player_ids(self) -> FrozenSet[int]:
        """The unordered pair of player ids."""
        return frozenset({self.player1_id, self.player2_id})

    def has_player(self, player_id: int) -> bool:
        return player_id in self.player_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        return cls(
            id=data.get("id"),
            player1_id=data["player1_id"],
            player2_id=data["player2_id"],
            created_at=parse_timestamp(data.get("created_at")) or utc_now(),
        )
