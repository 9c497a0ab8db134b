def test_standings_ranked_per_group(started):
    group_a = started.matches.list_matches(group_id=started.group_a)
    scores = {(1, 2): (6, 1), (1, 3): (6, 4), (2, 3): (3, 6)}
    for match in group_a:
        started.matches.submit_score(match.id, *scores[(match.team1_id, match.team2_id)])

    tables = started.standings()

    assert [group.name for group, _ in tables] == ["Group A", "Group B"]
    rows_a = tables[0][1]
    assert [row.team_id for row in rows_a] == [1, 3, 2]
    assert [row.game_difference for row in rows_a] == [7, 1, -8]
    assert [row.record.matches_won for row in rows_a] == [2, 1, 0]


def test_standings_empty_before_start(seeded):
    assert seeded.standings() == []
    assert not seeded.is_started


def test_summary(started):
    match = started.matches.list_matches()[0]
    started.matches.submit_score(match.id, 6, 2)

    summary = started.summary()

    assert summary["players"] == 10
    assert summary["teams"] == 5
    assert summary["groups"] == 2
    assert summary["assigned_teams"] == 5
    assert summary["started"] is True
    assert (summary["matches"], summary["matches_pending"], summary["matches_completed"]) == (4, 3, 1)
    assert summary["finals"] == 0
