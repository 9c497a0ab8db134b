"""Group and team-to-group assignment data classes."""

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
from typing import Any, Dict, List, Optional

from padeltournament.utils import format_timestamp, parse_timestamp, utc_now


@dataclass
class Group:
    """A named round-robin group.

    Attributes
    ----------
    name : str
        Display name, unique across the tournament.
    id : int or None
        Store-assigned identifier.
    created_at : datetime
        Creation time (UTC).
    """

    name: str
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        """Deserialize group from dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            created_at=parse_timestamp(data.get("created_at")) or utc_now(),
        )


@dataclass
class Assignment:
    """Binds one team to one group."""

    group_id: int
    team_id: int
    id: Optional[int] = None
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize assignment to dictionary."""
        return {
            "id": self.id,
            "group_id": self.group_id,
            "team_id": self.team_id,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Assignment":
        """Deserialize assignment from dictionary."""
        return cls(
            id=data.get("id"),
            group_id=data["group_id"],
            team_id=data["team_id"],
            created_at=parse_timestamp(data.get("created_at")) or utc_now(),
        )


@dataclass
class TeamAssignment:
    """One cell of the assignment grid: a team and whether it sits in the group."""

    team_id: int
    label: str
    assigned: bool


@dataclass
class GroupWithTeams:
    """A group with the teams that may be toggled into it.

    Only teams assigned to this group or to no group at all are listed.
    """

    group: Group
    teams: List[TeamAssignment] = field(default_factory=list)

    @property
    def assigned_team_ids(self) -> List[int]:
        return [t.team_id for t in self.teams if t.assigned]
