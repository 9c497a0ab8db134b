"""Score validation shared by group matches and bracket finals."""

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


from padeltournament.constants import MIN_GAMES_TO_WIN
from padeltournament.exceptions import ValidationError
from padeltournament.type_hints import ScoreLine
from padeltournament.utils.validation import validate_games


def validate_score(
    team1_score, team2_score, min_games_to_win: int = MIN_GAMES_TO_WIN
) -> ScoreLine:
    """Check a submitted score line before it is accepted.

    Rules, in order:
    - both scores are non-negative integers
    - the scores differ (there are no draws)
    - at least one side reached ``min_games_to_win``

    Args:
        team1_score: Games won by team 1
        team2_score: Games won by team 2
        min_games_to_win: Games needed to take the set

    Returns:
        The validated ``(team1_score, team2_score)``

    Raises:
        ValidationError: If any rule is broken
    """
    first = validate_games(team1_score, "Team 1 score").raise_if_invalid()
    second = validate_games(team2_score, "Team 2 score").raise_if_invalid()

    if first == second:
        raise ValidationError(
            f"Scores cannot be equal ({first}-{second}): there must be a winner"
        )

    if first < min_games_to_win and second < min_games_to_win:
        raise ValidationError(
            f"Incomplete score {first}-{second}: "
            f"at least one team must reach {min_games_to_win} games"
        )

    return first, second


def determine_winner(
    team1_id: int, team2_id: int, team1_score: int, team2_score: int
) -> int:
    """Return the id of the side with more games.

    The winner is always derived from the scores; callers never pass one in.
    """
    if team1_score == team2_score:
        raise ValidationError("A tied score has no winner")
    return team1_id if team1_score > team2_score else team2_id
