"""Player, team and group management."""

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

from dataclasses import replace
from typing import Dict, List, Optional

from padeltournament.exceptions import EntityNotFoundError, ValidationError
from padeltournament.models import Group, Player, Team
from padeltournament.storage import TournamentStore
from padeltournament.utils import setup_logger
from padeltournament.utils.validation import validate_name_strict

logger = setup_logger(__name__)


class RosterService:
    """CRUD for the tournament's players, teams and groups.

    Related entities are referenced by id only; names are resolved from the
    store when something is displayed (see :meth:`team_label`).
    """

    def __init__(self, store: TournamentStore):
        self.store = store

    # ========== Players ==========

    def add_player(self, name: str) -> Player:
        player = self.store.add_player(Player(name=validate_name_strict(name)))
        logger.info(f"Added player: {player.name} ({player.id})")
        return player

    def rename_player(self, player_id: int, name: str) -> Player:
        with self.store.transaction():
            player = self.store.get_player(player_id)
            updated = self.store.update_player(
                replace(player, name=validate_name_strict(name))
            )
        logger.info(f"Renamed player {player_id} to {updated.name}")
        return updated

    def delete_player(self, player_id: int) -> None:
        """Delete a player who is not part of any team."""
        with self.store.transaction():
            self.store.get_player(player_id)
            for team in self.store.list_teams():
                if team.has_player(player_id):
                    raise ValidationError(
                        f"Player {player_id} belongs to team {team.id}; "
                        "delete or edit the team first"
                    )
            self.store.delete_player(player_id)
        logger.info(f"Removed player {player_id}")

    def list_players(self) -> List[Player]:
        """Players sorted by name."""
        return sorted(self.store.list_players(), key=lambda p: (p.name.lower(), p.id))

    # ========== Teams ==========

    def add_team(self, player1_id: int, player2_id: int) -> Team:
        """Form a team from two existing, different players.

        Raises:
            ValidationError: If both slots name the same player
            EntityNotFoundError: If a player does not exist
        """
        team = Team(player1_id=player1_id, player2_id=player2_id)
        with self.store.transaction():
            self.store.get_player(player1_id)
            self.store.get_player(player2_id)
            team = self.store.add_team(team)
        logger.info(f"Added team {team.id}: players {player1_id} and {player2_id}")
        return team

    def update_team(self, team_id: int, player1_id: int, player2_id: int) -> Team:
        with self.store.transaction():
            team = self.store.get_team(team_id)
            self.store.get_player(player1_id)
            self.store.get_player(player2_id)
            updated = self.store.update_team(
                replace(team, player1_id=player1_id, player2_id=player2_id)
            )
        logger.info(f"Updated team {team_id}: players {player1_id} and {player2_id}")
        return updated

    def delete_team(self, team_id: int) -> None:
        """Delete a team and its group assignment.

        Matches and standings that mention the team are left alone.
        """
        with self.store.transaction():
            self.store.get_team(team_id)
            assignment = self.store.find_assignment(team_id)
            if assignment is not None:
                self.store.delete_assignment(assignment.group_id, team_id)
            self.store.delete_team(team_id)
        logger.info(f"Removed team {team_id}")

    def list_teams(self) -> List[Team]:
        return self.store.list_teams()

    def team_label(self, team_id: int, players: Optional[Dict[int, Player]] = None) -> str:
        """Display name of a team, such as ``"Ana / Bea"``.

        Args:
            team_id: Team to describe
            players: Optional preloaded id -> Player map to avoid repeated lookups
        """
        try:
            team = self.store.get_team(team_id)
        except EntityNotFoundError:
            return f"Team {team_id} (deleted)"
        if players is None:
            players = {p.id: p for p in self.store.list_players()}
        names = [
            players[pid].name if pid in players else f"Player {pid}"
            for pid in (team.player1_id, team.player2_id)
        ]
        return " / ".join(names)

    def team_labels(self) -> Dict[int, str]:
        """Labels for every team, keyed by team id."""
        players = {p.id: p for p in self.store.list_players()}
        return {t.id: self.team_label(t.id, players) for t in self.store.list_teams()}

    # ========== Groups ==========

    def _check_group_name(self, name: str, exclude_id: Optional[int] = None) -> str:
        name = validate_name_strict(name, "Group name")
        for group in self.store.list_groups():
            if group.id != exclude_id and group.name.lower() == name.lower():
                raise ValidationError(f"A group named '{group.name}' already exists")
        return name

    def add_group(self, name: str) -> Group:
        with self.store.transaction():
            group = self.store.add_group(Group(name=self._check_group_name(name)))
        logger.info(f"Added group: {group.name} ({group.id})")
        return group

    def rename_group(self, group_id: int, name: str) -> Group:
        with self.store.transaction():
            group = self.store.get_group(group_id)
            updated = self.store.update_group(
                replace(group, name=self._check_group_name(name, exclude_id=group_id))
            )
        logger.info(f"Renamed group {group_id} to {updated.name}")
        return updated

    def delete_group(self, group_id: int) -> None:
        """Delete a group together with its team assignments."""
        with self.store.transaction():
            self.store.get_group(group_id)
            for assignment in self.store.list_assignments():
                if assignment.group_id == group_id:
                    self.store.delete_assignment(group_id, assignment.team_id)
            self.store.delete_group(group_id)
        logger.info(f"Removed group {group_id}")

    def list_groups(self) -> List[Group]:
        """Groups sorted by name."""
        return sorted(self.store.list_groups(), key=lambda g: (g.name.lower(), g.id))

    def find_group(self, name: str) -> Group:
        """Look a group up by name, case-insensitively."""
        for group in self.store.list_groups():
            if group.name.lower() == name.strip().lower():
                return group
        raise EntityNotFoundError("Group", name)
