"""Standings ledger: one aggregate record per team and group.

This module creates the standing records when a tournament starts and
applies each completed match to the two records it affects.
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

from typing import Iterable, List, Optional, Tuple, Union

from padeltournament.exceptions import (
    AlreadyInitializedError,
    NoAssignmentsError,
    RecordNotFoundError,
    ValidationError,
)
from padeltournament.models import Assignment, StandingRecord
from padeltournament.storage import TournamentStore
from padeltournament.type_hints import AssignmentRow
from padeltournament.utils import setup_logger
from padeltournament.utils.validation import validate_games

logger = setup_logger(__name__)

AssignmentLike = Union[Assignment, AssignmentRow]


def _as_row(assignment: AssignmentLike) -> AssignmentRow:
    if isinstance(assignment, Assignment):
        return assignment.group_id, assignment.team_id
    group_id, team_id = assignment
    return group_id, team_id


class StandingsLedger:
    """Keeps the per-group standing records in step with match results.

    This class is responsible for:
    - Creating one zeroed record per assigned team, exactly once
    - Applying a match result to both participants in one atomic write
    - Clearing all records on an explicit admin reset
    """

    def __init__(self, store: TournamentStore):
        self.store = store

    def is_initialized(self) -> bool:
        """True once any standing record exists."""
        return bool(self.store.list_standing_records())

    def records(self, group_id: Optional[int] = None) -> List[StandingRecord]:
        """Standing records, optionally of one group only."""
        return self.store.list_standing_records(group_id)

    def initialize(
        self, assignments: Optional[Iterable[AssignmentLike]] = None
    ) -> List[StandingRecord]:
        """Create a zeroed standing record for every assigned team.

        Args:
            assignments: Assignments or ``(group_id, team_id)`` rows; read
                from the store when omitted

        Returns:
            The created records

        Raises:
            NoAssignmentsError: If there are no assignments
            AlreadyInitializedError: If any standing record already exists
        """
        with self.store.transaction():
            if assignments is None:
                assignments = self.store.list_assignments()
            rows = [_as_row(a) for a in assignments]

            if not rows:
                raise NoAssignmentsError(
                    "No teams assigned to groups. "
                    "Please assign teams before starting the tournament."
                )

            if self.store.list_standing_records():
                raise AlreadyInitializedError(
                    "Tournament standings already initialized. "
                    "Clear existing standings first."
                )

            seen = set()
            records = []
            for group_id, team_id in rows:
                if (group_id, team_id) in seen:
                    continue
                seen.add((group_id, team_id))
                records.append(StandingRecord(group_id=group_id, team_id=team_id))

            created = self.store.create_standing_records(records)

        logger.info(f"Initialized {len(created)} standing records")
        return created

    def apply_result(
        self,
        group_id: int,
        team_a: int,
        team_a_score: int,
        team_b: int,
        team_b_score: int,
    ) -> Tuple[StandingRecord, StandingRecord]:
        """Apply one finished match to both teams' records.

        The higher score takes the win. Each side adds its own score to
        games won and the opponent's to games lost. Both records are written
        in a single store call, so readers see either neither or both.

        Returns:
            The updated ``(team_a_record, team_b_record)``

        Raises:
            ValidationError: If the scores are invalid or tied, or the teams are the same
            RecordNotFoundError: If either team has no record in the group
        """
        score_a = validate_games(team_a_score, "Team A score").raise_if_invalid()
        score_b = validate_games(team_b_score, "Team B score").raise_if_invalid()
        if score_a == score_b:
            raise ValidationError(
                f"Scores cannot be equal ({score_a}-{score_b}): there must be a winner"
            )
        if team_a == team_b:
            raise ValidationError(f"Team {team_a} cannot play itself")

        with self.store.transaction():
            by_team = {r.team_id: r for r in self.store.list_standing_records(group_id)}
            missing = [t for t in (team_a, team_b) if t not in by_team]
            if missing:
                logger.critical(
                    f"Standings diverged from matches: no record for team(s) "
                    f"{missing} in group {group_id}"
                )
                raise RecordNotFoundError(group_id, missing)

            updated_a = by_team[team_a].with_result(score_a, score_b)
            updated_b = by_team[team_b].with_result(score_b, score_a)
            self.store.update_standing_records([updated_a, updated_b])

        logger.debug(
            f"Group {group_id}: team {team_a} {score_a}-{score_b} team {team_b} applied"
        )
        return updated_a, updated_b

    def clear(self) -> int:
        """Delete every standing record (destructive admin reset).

        Returns:
            Number of records removed
        """
        removed = self.store.clear_standing_records()
        logger.warning(f"Cleared {removed} standing records")
        return removed
