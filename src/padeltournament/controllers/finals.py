"""Bracket stage management: quarterfinals, semifinals and the final."""

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
from padeltournament.controllers.scoring import determine_winner, validate_score
from padeltournament.exceptions import DuplicateResultError, TournamentStateException
from padeltournament.models import FinalMatch, FinalType
from padeltournament.storage import TournamentStore
from padeltournament.type_hints import FinalTypeValue
from padeltournament.utils import setup_logger, utc_now
from padeltournament.utils.validation import validate_distinct

logger = setup_logger(__name__)


class FinalsService:
    """Creates, edits and scores bracket matches.

    Bracket matches are entered by hand; there is no automatic seeding from
    the group standings.
    """

    def __init__(self, store: TournamentStore, min_games_to_win: int = MIN_GAMES_TO_WIN):
        self.store = store
        self.min_games_to_win = min_games_to_win

    def create_final(
        self, team1_id: int, team2_id: int, final_type: Union[FinalType, FinalTypeValue]
    ) -> FinalMatch:
        """Create a bracket match between two existing, different teams.

        Raises:
            ValidationError: If a team is missing, the teams match, or the type is unknown
            EntityNotFoundError: If a team does not exist
        """
        stage = FinalType.parse(final_type)
        validate_distinct(team1_id, team2_id, "Team 1", "Team 2").raise_if_invalid()
        with self.store.transaction():
            self.store.get_team(team1_id)
            self.store.get_team(team2_id)
            final = self.store.add_final(
                FinalMatch(team1_id=team1_id, team2_id=team2_id, type=stage)
            )
        logger.info(
            f"Created {stage.display_name} #{final.id}: team {team1_id} vs team {team2_id}"
        )
        return final

    def update_final(
        self,
        final_id: int,
        team1_id: Optional[int] = None,
        team2_id: Optional[int] = None,
        final_type: Optional[Union[FinalType, FinalTypeValue]] = None,
    ) -> FinalMatch:
        """Change the teams or stage of a bracket match that has no result yet."""
        with self.store.transaction():
            final = self.store.get_final(final_id)
            if final.is_completed:
                raise TournamentStateException(
                    f"Final {final_id} is completed and can no longer be edited"
                )
            new_team1 = final.team1_id if team1_id is None else team1_id
            new_team2 = final.team2_id if team2_id is None else team2_id
            validate_distinct(new_team1, new_team2, "Team 1", "Team 2").raise_if_invalid()
            self.store.get_team(new_team1)
            self.store.get_team(new_team2)
            updated = self.store.update_final(
                replace(
                    final,
                    team1_id=new_team1,
                    team2_id=new_team2,
                    type=final.type if final_type is None else FinalType.parse(final_type),
                    updated_at=utc_now(),
                )
            )
        logger.info(f"Updated final #{final_id}")
        return updated

    def submit_score(self, final_id: int, team1_score, team2_score) -> FinalMatch:
        """Record a bracket result; the winner is computed from the scores.

        Raises:
            ValidationError: If the score is malformed, tied or incomplete
            DuplicateResultError: If the final already has a result
        """
        score1, score2 = validate_score(team1_score, team2_score, self.min_games_to_win)
        with self.store.transaction():
            final = self.store.get_final(final_id)
            winner_id = determine_winner(final.team1_id, final.team2_id, score1, score2)
            try:
                completed = self.store.complete_final(final_id, score1, score2, winner_id)
            except DuplicateResultError:
                logger.warning(f"Rejected duplicate result for final {final_id}")
                raise
        logger.info(
            f"{completed.type.display_name} #{final_id}: {score1}-{score2}, "
            f"winner team {winner_id}"
        )
        return completed

    def delete_final(self, final_id: int) -> None:
        self.store.delete_final(final_id)
        logger.info(f"Deleted final #{final_id}")

    def get_final(self, final_id: int) -> FinalMatch:
        return self.store.get_final(final_id)

    def list_finals(
        self, final_type: Optional[Union[FinalType, FinalTypeValue]] = None
    ) -> List[FinalMatch]:
        """Bracket matches in play order: stage first, then creation."""
        finals = self.store.list_finals()
        if final_type is not None:
            stage = FinalType.parse(final_type)
            finals = [f for f in finals if f.type == stage]
        return sorted(finals, key=lambda f: f.sort_key)

    def finals_by_stage(self) -> Dict[FinalType, List[FinalMatch]]:
        """Every stage mapped to its matches, empty stages included."""
        stages: Dict[FinalType, List[FinalMatch]] = {stage: [] for stage in FinalType}
        for final in self.list_finals():
            stages[final.type].append(final)
        return stages
