import pytest

from padeltournament.exceptions import EntityNotFoundError, ValidationError


def test_players_sorted_by_name(tournament):
    for name in ("  Zoe ", "ana", "Marta"):
        tournament.roster.add_player(name)
    assert [p.name for p in tournament.roster.list_players()] == ["ana", "Marta", "Zoe"]


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_player_name_rejected(tournament, name):
    with pytest.raises(ValidationError):
        tournament.roster.add_player(name)


def test_rename_player(tournament):
    player = tournament.roster.add_player("Ana")
    assert tournament.roster.rename_player(player.id, "Ana Maria").name == "Ana Maria"
    with pytest.raises(EntityNotFoundError):
        tournament.roster.rename_player(42, "Nobody")


def test_team_needs_two_distinct_existing_players(tournament):
    ana = tournament.roster.add_player("Ana")
    with pytest.raises(ValidationError):
        tournament.roster.add_team(ana.id, ana.id)
    with pytest.raises(EntityNotFoundError):
        tournament.roster.add_team(ana.id, 99)
    assert tournament.roster.list_teams() == []


def test_team_label(tournament):
    ana = tournament.roster.add_player("Ana")
    bea = tournament.roster.add_player("Bea")
    team = tournament.roster.add_team(ana.id, bea.id)

    assert tournament.roster.team_label(team.id) == "Ana / Bea"
    assert tournament.roster.team_labels() == {team.id: "Ana / Bea"}
    assert tournament.roster.team_label(77) == "Team 77 (deleted)"


def test_player_in_team_cannot_be_deleted(tournament):
    ana = tournament.roster.add_player("Ana")
    bea = tournament.roster.add_player("Bea")
    team = tournament.roster.add_team(ana.id, bea.id)

    with pytest.raises(ValidationError):
        tournament.roster.delete_player(ana.id)

    tournament.roster.delete_team(team.id)
    tournament.roster.delete_player(ana.id)
    assert [p.name for p in tournament.roster.list_players()] == ["Bea"]


def test_update_team(tournament, make_teams):
    team_id = make_teams(1)[0]
    extra = tournament.roster.add_player("Zoe")
    team = tournament.roster.update_team(team_id, 1, extra.id)
    assert tournament.roster.team_label(team.id) == "Ana / Zoe"


def test_delete_team_drops_its_assignment(tournament, make_teams):
    team_id = make_teams(1)[0]
    group = tournament.roster.add_group("A")
    tournament.assignments.assign(group.id, team_id)

    tournament.roster.delete_team(team_id)

    assert tournament.store.list_assignments() == []


def test_group_names_unique_case_insensitive(tournament):
    tournament.roster.add_group("Group A")
    with pytest.raises(ValidationError, match="already exists"):
        tournament.roster.add_group("group a")

    group_b = tournament.roster.add_group("Group B")
    with pytest.raises(ValidationError):
        tournament.roster.rename_group(group_b.id, "GROUP A")
    assert tournament.roster.rename_group(group_b.id, "group b").name == "group b"


def test_delete_group_drops_assignments(tournament, make_teams):
    teams = make_teams(2)
    group = tournament.roster.add_group("A")
    for team_id in teams:
        tournament.assignments.assign(group.id, team_id)

    tournament.roster.delete_group(group.id)

    assert tournament.store.list_assignments() == []
    assert len(tournament.assignments.unassigned_teams()) == 2


def test_find_group(tournament):
    group = tournament.roster.add_group("Group A")
    assert tournament.roster.find_group(" group a ").id == group.id
    with pytest.raises(EntityNotFoundError):
        tournament.roster.find_group("Group Z")
