"""Group-stage match and bracket final data classes."""

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
from typing import Any, Dict, Optional, Tuple

from padeltournament.models.enums import FinalType, MatchStatus
from padeltournament.utils import format_timestamp, parse_timestamp, utc_now


class _Sides:
    """Helpers shared by anything with a team1 and a team2."""

    team1_id: int
    team2_id: int
    team1_score: Optional[int]
    team2_score: Optional[int]

    @property
    def team_ids(self) -> Tuple[int, int]:
        return (self.team1_id, self.team2_id)

    def score_display(self) -> str:
        """Score line such as ``6-3``, or ``-`` when unplayed."""
        if self.team1_score is None or self.team2_score is None:
            return "-"
        return f"{self.team1_score}-{self.team2_score}"


@dataclass
class Match(_Sides):
    """A round-robin match between two teams of the same group.

    Attributes
    ----------
    group_id : int
        Group both teams belong to.
    team1_id, team2_id : int
        The two sides, in pairing order.
    team1_score, team2_score : int or None
        Games won by each side; ``None`` until the match is played.
    status : MatchStatus
        ``pending`` -> ``completed`` (optionally via ``in_progress``).
    winner_id : int or None
        Computed from the scores when the result is recorded.
    """

    group_id: int
    team1_id: int
    team2_id: int
    team1_score: Optional[int] = None
    team2_score: Optional[int] = None
    status: MatchStatus = MatchStatus.PENDING
    winner_id: Optional[int] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def is_completed(self) -> bool:
        return self.status == MatchStatus.COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "group_id": self.group_id,
            "team1_id": self.team1_id,
            "team2_id": self.team2_id,
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
            "status": self.status.value,
            "winner_id": self.winner_id,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        created = parse_timestamp(data.get("created_at")) or utc_now()
        return cls(
            id=data.get("id"),
            group_id=data["group_id"],
            team1_id=data["team1_id"],
            team2_id=data["team2_id"],
            team1_score=data.get("team1_score"),
            team2_score=data.get("team2_score"),
            status=MatchStatus.parse(data.get("status", MatchStatus.PENDING.value)),
            winner_id=data.get("winner_id"),
            created_at=created,
            updated_at=parse_timestamp(data.get("updated_at")) or created,
        )


@dataclass
class FinalMatch(_Sides):
    """A bracket match (quarterfinal, semifinal or final).

    A final has no group and no status column; it counts as completed once
    both scores are recorded.
    """

    team1_id: int
    team2_id: int
    type: FinalType
    team1_score: Optional[int] = None
    team2_score: Optional[int] = None
    winner_id: Optional[int] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def is_completed(self) -> bool:
        return self.team1_score is not None and self.team2_score is not None

    @property
    def sort_key(self) -> Tuple[int, datetime, int]:
        """Bracket order: stage first, then creation order."""
        return (self.type.stage_index, self.created_at, self.id or 0)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize final to dictionary."""
        return {
            "id": self.id,
            "team1_id": self.team1_id,
            "team2_id": self.team2_id,
            "type": self.type.value,
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
            "winner_id": self.winner_id,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinalMatch":
        """Deserialize final from dictionary."""
        created = parse_timestamp(data.get("created_at")) or utc_now()
        return cls(
            id=data.get("id"),
            team1_id=data["team1_id"],
            team2_id=data["team2_id"],
            type=FinalType.parse(data["type"]),
            team1_score=data.get("team1_score"),
            team2_score=data.get("team2_score"),
            winner_id=data.get("winner_id"),
            created_at=created,
            updated_at=parse_timestamp(data.get("updated_at")) or created,
        )
