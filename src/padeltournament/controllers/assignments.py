"""Team-to-group assignment with the one-group-per-team rule."""

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

from typing import List

from padeltournament.controllers.roster import RosterService
from padeltournament.exceptions import TeamAlreadyAssignedError
from padeltournament.models import (
    Assignment,
    GroupWithTeams,
    Team,
    TeamAssignment,
)
from padeltournament.storage import TournamentStore
from padeltournament.utils import setup_logger

logger = setup_logger(__name__)


class AssignmentService:
    """Binds teams to groups.

    A team belongs to at most one group. The rule is checked on every write,
    inside a store transaction, rather than by filtering at read time.
    """

    def __init__(self, store: TournamentStore, roster: RosterService):
        self.store = store
        self.roster = roster

    def assign(self, group_id: int, team_id: int) -> Assignment:
        """Put a team into a group.

        Assigning a team to the group it is already in returns the existing
        assignment.

        Raises:
            TeamAlreadyAssignedError: If the team is in a different group
            EntityNotFoundError: If the group or team does not exist
        """
        with self.store.transaction():
            self.store.get_group(group_id)
            self.store.get_team(team_id)
            existing = self.store.find_assignment(team_id)
            if existing is not None:
                if existing.group_id == group_id:
                    return existing
                raise TeamAlreadyAssignedError(team_id, existing.group_id)
            assignment = self.store.add_assignment(
                Assignment(group_id=group_id, team_id=team_id)
            )
        logger.info(f"Assigned team {team_id} to group {group_id}")
        return assignment

    def remove(self, group_id: int, team_id: int) -> bool:
        """Take a team out of a group; return False if it was not there."""
        removed = self.store.delete_assignment(group_id, team_id)
        if removed:
            logger.info(f"Removed team {team_id} from group {group_id}")
        return removed

    def toggle(self, group_id: int, team_id: int) -> bool:
        """Assign the team if it is not in the group, remove it otherwise.

        Returns:
            True if the team is now assigned to the group
        """
        with self.store.transaction():
            existing = self.store.find_assignment(team_id)
            if existing is not None and existing.group_id == group_id:
                self.remove(group_id, team_id)
                return False
            self.assign(group_id, team_id)
            return True

    def teams_by_group(self, group_id: int) -> List[int]:
        """Team ids assigned to a group, in team id order."""
        return sorted(
            a.team_id for a in self.store.list_assignments() if a.group_id == group_id
        )

    def unassigned_teams(self) -> List[Team]:
        assigned = {a.team_id for a in self.store.list_assignments()}
        return [t for t in self.store.list_teams() if t.id not in assigned]

    def groups_with_teams(self) -> List[GroupWithTeams]:
        """The assignment grid.

        Each group (sorted by name) lists the teams that are assigned to it or
        to no group at all; teams sitting in another group are hidden.
        """
        with self.store.transaction():
            groups = self.roster.list_groups()
            teams = self.store.list_teams()
            owner = {a.team_id: a.group_id for a in self.store.list_assignments()}
            labels = self.roster.team_labels()

        grid = []
        for group in groups:
            cells = [
                TeamAssignment(
                    team_id=team.id,
                    label=labels[team.id],
                    assigned=owner.get(team.id) == group.id,
                )
                for team in teams
                if owner.get(team.id) in (None, group.id)
            ]
            grid.append(GroupWithTeams(group=group, teams=cells))
        return grid
