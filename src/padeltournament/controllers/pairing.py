"""Round-robin pairing generation for group play.

Every team in a group plays every other team of that group exactly once.
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

from itertools import combinations
from typing import Dict, Iterable, List

from padeltournament.exceptions import NoAssignmentsError, ValidationError
from padeltournament.models import Pairing
from padeltournament.type_hints import AssignmentRow, AssignmentsByGroup, TeamsByGroup
from padeltournament.utils import setup_logger

logger = setup_logger(__name__)


def group_assignments(rows: Iterable[AssignmentRow]) -> TeamsByGroup:
    """Fold ``(group_id, team_id)`` rows into ordered team lists per group.

    Groups appear in first-seen order; teams keep their row order.
    """
    teams_by_group: TeamsByGroup = {}
    for group_id, team_id in rows:
        teams_by_group.setdefault(group_id, []).append(team_id)
    return teams_by_group


def round_robin_count(num_teams: int) -> int:
    """Number of single-leg fixtures for a group of ``num_teams``."""
    return num_teams * (num_teams - 1) // 2 if num_teams > 1 else 0


class PairingGenerator:
    """Produces single round-robin pairings for each group.

    The generator is stateless; :meth:`generate` is a pure function of its
    input and may be called from any thread.
    """

    def generate(self, assignments_by_group: AssignmentsByGroup) -> List[Pairing]:
        """Pair every two teams of each group exactly once.

        Pairs come out group by group in mapping order, and within a group in
        ``i < j`` index order of the team sequence, so a given input always
        yields the same list.

        Args:
            assignments_by_group: Ordered team ids per group id

        Returns:
            List of pairings; a group with fewer than two teams adds none

        Raises:
            NoAssignmentsError: If no group has any team assigned
            ValidationError: If a team appears twice in a group or in two groups
        """
        if not assignments_by_group or not any(assignments_by_group.values()):
            raise NoAssignmentsError("No teams assigned to groups")

        owner: Dict[int, int] = {}
        for group_id, team_ids in assignments_by_group.items():
            for team_id in team_ids:
                if team_id in owner:
                    if owner[team_id] == group_id:
                        raise ValidationError(
                            f"Team {team_id} is listed twice in group {group_id}"
                        )
                    raise ValidationError(
                        f"Team {team_id} is assigned to groups "
                        f"{owner[team_id]} and {group_id}"
                    )
                owner[team_id] = group_id

        pairings: List[Pairing] = []
        for group_id, team_ids in assignments_by_group.items():
            group_pairs = [
                Pairing(group_id, first, second)
                for first, second in combinations(team_ids, 2)
            ]
            logger.debug(
                f"Group {group_id}: {len(team_ids)} teams, {len(group_pairs)} pairings"
            )
            pairings.extend(group_pairs)

        return pairings
