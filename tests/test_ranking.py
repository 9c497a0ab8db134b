from padeltournament.controllers import RankingProjector
from padeltournament.models import StandingRecord


def _rec(team_id, won, lost, games_won, games_lost, group_id=1):
    return StandingRecord(
        group_id=group_id,
        team_id=team_id,
        matches_played=won + lost,
        matches_won=won,
        matches_lost=lost,
        games_won=games_won,
        games_lost=games_lost,
        id=team_id,
    )


def test_matches_won_ranks_first():
    rows = RankingProjector().project(
        [_rec(1, 1, 2, 20, 10), _rec(2, 2, 1, 12, 15), _rec(3, 0, 3, 5, 18)]
    )
    assert [r.team_id for r in rows] == [2, 1, 3]
    assert [r.position for r in rows] == [1, 2, 3]


def test_game_difference_breaks_tie_on_wins():
    t1 = _rec(1, 2, 1, 17, 12)  # +5
    t2 = _rec(2, 2, 1, 15, 13)  # +2
    rows = RankingProjector().project([t2, t1])
    assert [r.team_id for r in rows] == [1, 2]
    assert rows[0].game_difference == 5
    assert rows[1].game_difference == 2


def test_full_ties_keep_input_order():
    records = [_rec(5, 1, 1, 10, 10), _rec(3, 1, 1, 10, 10), _rec(9, 1, 1, 10, 10)]
    rows = RankingProjector().project(records)
    assert [r.team_id for r in rows] == [5, 3, 9]


def test_projection_is_pure():
    records = [_rec(1, 0, 1, 3, 6), _rec(2, 1, 0, 6, 3)]
    snapshot = [StandingRecord(**vars(r)) for r in records]
    projector = RankingProjector()

    first = projector.project(records)
    second = projector.project(records)

    assert first == second
    assert records == snapshot
    # Rows hold copies, not the caller's objects
    assert all(row.record is not rec for row in first for rec in records)


def test_empty_input():
    assert RankingProjector().project([]) == []


def test_project_by_group_ranks_groups_independently():
    records = [
        _rec(1, 0, 1, 3, 6, group_id=1),
        _rec(2, 1, 0, 6, 3, group_id=1),
        _rec(3, 2, 0, 12, 4, group_id=2),
    ]
    ranked = RankingProjector().project_by_group(records)

    assert list(ranked) == [1, 2]
    assert [r.team_id for r in ranked[1]] == [2, 1]
    assert [(r.position, r.team_id) for r in ranked[2]] == [(1, 3)]
