import pytest

from padeltournament.controllers import determine_winner, validate_score
from padeltournament.exceptions import ValidationError


@pytest.mark.parametrize(
    "score",
    [(6, 3), (3, 6), (6, 0), (7, 5), (7, 6), (6, 7), (9, 8)],
)
def test_valid_scores_accepted(score):
    assert validate_score(*score) == score


def test_draw_rejected():
    with pytest.raises(ValidationError, match="cannot be equal"):
        validate_score(6, 6)


def test_incomplete_score_rejected():
    with pytest.raises(ValidationError, match="at least one team must reach 6"):
        validate_score(5, 4)


@pytest.mark.parametrize(
    "score",
    [(-1, 6), (6, -2), (None, 6), (6, None), ("6", 3), (6.0, 3), (True, 6)],
)
def test_malformed_scores_rejected(score):
    with pytest.raises(ValidationError):
        validate_score(*score)


def test_custom_threshold():
    assert validate_score(4, 2, min_games_to_win=4) == (4, 2)
    with pytest.raises(ValidationError):
        validate_score(3, 2, min_games_to_win=4)


def test_winner_follows_scores():
    assert determine_winner(10, 20, 6, 3) == 10
    assert determine_winner(10, 20, 4, 6) == 20
    with pytest.raises(ValidationError):
        determine_winner(10, 20, 6, 6)
