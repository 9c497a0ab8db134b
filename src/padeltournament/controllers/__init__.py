"""Tournament controllers.

This package holds the computation core (pairing, standings, ranking and
score validation) and the services that coordinate it with the store.
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

from padeltournament.controllers.assignments import AssignmentService
from padeltournament.controllers.finals import FinalsService
from padeltournament.controllers.matches import MatchService
from padeltournament.controllers.pairing import PairingGenerator, group_assignments
from padeltournament.controllers.ranking import RankingProjector
from padeltournament.controllers.roster import RosterService
from padeltournament.controllers.scoring import determine_winner, validate_score
from padeltournament.controllers.standings import StandingsLedger

__all__ = [
    "PairingGenerator",
    "group_assignments",
    "StandingsLedger",
    "RankingProjector",
    "validate_score",
    "determine_winner",
    "MatchService",
    "FinalsService",
    "AssignmentService",
    "RosterService",
]
