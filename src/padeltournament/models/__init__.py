"""Data models for Padel Tournament."""

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

from padeltournament.models.enums import FinalType, MatchStatus
from padeltournament.models.group import (
    Assignment,
    Group,
    GroupWithTeams,
    TeamAssignment,
)
from padeltournament.models.match import FinalMatch, Match
from padeltournament.models.player import Player
from padeltournament.models.standing import Pairing, RankedRow, StandingRecord
from padeltournament.models.team import Team

__all__ = [
    "Player",
    "Team",
    "Group",
    "Assignment",
    "TeamAssignment",
    "GroupWithTeams",
    "Match",
    "FinalMatch",
    "MatchStatus",
    "FinalType",
    "StandingRecord",
    "Pairing",
    "RankedRow",
]
