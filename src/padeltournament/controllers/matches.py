"""Group-stage match generation and score submission.

This module handles creating the round-robin fixtures and recording results
with proper validation and at-most-once application to the standings.
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

from dataclasses import replace
from typing import Dict, List, Optional, Union

from padeltournament.constants import MIN_GAMES_TO_WIN
from padeltournament.controllers.pairing import PairingGenerator, group_assignments
from padeltournament.controllers.scoring import determine_winner, validate_score
from padeltournament.controllers.standings import StandingsLedger
from padeltournament.exceptions import (
    DuplicateResultError,
    RecordNotFoundError,
    TournamentStateException,
    ValidationError,
)
from padeltournament.models import Match, MatchStatus
from padeltournament.storage import TournamentStore
from padeltournament.type_hints import MatchStatusValue
from padeltournament.utils import setup_logger, utc_now

logger = setup_logger(__name__)


class MatchService:
    """Creates group matches and records their results.

    This class is responsible for:
    - Generating every round-robin match from the current assignments
    - Validating submitted scores and computing the winner
    - Gating each match so its result reaches the standings at most once
    """

    def __init__(
        self,
        store: TournamentStore,
        ledger: StandingsLedger,
        pairing_generator: Optional[PairingGenerator] = None,
        min_games_to_win: int = MIN_GAMES_TO_WIN,
    ):
        self.store = store
        self.ledger = ledger
        self.pairing_generator = pairing_generator or PairingGenerator()
        self.min_games_to_win = min_games_to_win

    # ========== Generation ==========

    def generate_round_robin(self) -> List[Match]:
        """Create a pending match for every pairing in every group.

        Returns:
            The created matches

        Raises:
            NoAssignmentsError: If no team is assigned to a group
            ValidationError: If no group has two or more teams
            TournamentStateException: If matches were already generated
        """
        with self.store.transaction():
            if self.store.list_matches():
                raise TournamentStateException(
                    "Matches already generated for this tournament"
                )

            rows = [(a.group_id, a.team_id) for a in self.store.list_assignments()]
            pairings = self.pairing_generator.generate(group_assignments(rows))
            if not pairings:
                raise ValidationError("No matches to create")

            created = self.store.create_matches(
                Match(group_id=p.group_id, team1_id=p.team1_id, team2_id=p.team2_id)
                for p in pairings
            )

        logger.info(f"Generated {len(created)} round-robin matches")
        return created

    # ========== Results ==========

    def start_match(self, match_id: int) -> Match:
        """Mark a pending match as in progress."""
        with self.store.transaction():
            match = self.store.get_match(match_id)
            if match.status != MatchStatus.PENDING:
                raise TournamentStateException(
                    f"Match {match_id} is {match.status.value}, not pending"
                )
            started = self.store.update_match(
                replace(match, status=MatchStatus.IN_PROGRESS, updated_at=utc_now())
            )
        logger.info(f"Match {match_id} started")
        return started

    def submit_score(self, match_id: int, team1_score, team2_score) -> Match:
        """Record a match result and update both teams' standings.

        The winner is computed from the scores. The pending-to-completed
        transition is a compare-and-set in the store; the standings update
        runs in the same transaction, and if it fails the match is put back
        as it was, so no half-applied result is ever visible.

        Args:
            match_id: Match to score
            team1_score: Games won by team 1
            team2_score: Games won by team 2

        Returns:
            The completed match

        Raises:
            ValidationError: If the score is malformed, tied or incomplete
            DuplicateResultError: If the match is already completed
            RecordNotFoundError: If a team has no standing record
        """
        score1, score2 = validate_score(team1_score, team2_score, self.min_games_to_win)

        with self.store.transaction():
            before = self.store.get_match(match_id)
            winner_id = determine_winner(before.team1_id, before.team2_id, score1, score2)
            try:
                completed = self.store.complete_match(match_id, score1, score2, winner_id)
            except DuplicateResultError:
                logger.warning(f"Rejected duplicate result for match {match_id}")
                raise

            try:
                self.ledger.apply_result(
                    completed.group_id,
                    completed.team1_id,
                    score1,
                    completed.team2_id,
                    score2,
                )
            except RecordNotFoundError:
                self.store.reopen_match(before)
                raise

        logger.info(
            f"Match {match_id}: team {completed.team1_id} {score1}-{score2} "
            f"team {completed.team2_id}, winner {winner_id}"
        )
        return completed

    # ========== Queries ==========

    def get_match(self, match_id: int) -> Match:
        """Fetch one group match by id."""
        return self.store.get_match(match_id)

    def list_matches(
        self,
        group_id: Optional[int] = None,
        status: Optional[Union[MatchStatus, MatchStatusValue]] = None,
    ) -> List[Match]:
        """List matches, optionally filtered by group and/or status."""
        if status is not None:
            status = MatchStatus.parse(status)
        return self.store.list_matches(group_id=group_id, status=status)

    def matches_by_group(self) -> Dict[int, List[Match]]:
        grouped: Dict[int, List[Match]] = {}
        for match in self.store.list_matches():
            grouped.setdefault(match.group_id, []).append(match)
        return grouped

    def match_counts(self) -> Dict[str, int]:
        """Totals for the match overview: all, pending and completed."""
        matches = self.store.list_matches()
        return {
            "total": len(matches),
            "pending": sum(1 for m in matches if m.status == MatchStatus.PENDING),
            "completed": sum(1 for m in matches if m.is_completed),
        }

    def clear_matches(self) -> int:
        """Delete every group match (admin reset)."""
        removed = self.store.delete_matches()
        logger.warning(f"Deleted {removed} matches")
        return removed
