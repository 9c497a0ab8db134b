import pytest

from padeltournament.exceptions import EntityNotFoundError, TeamAlreadyAssignedError


@pytest.fixture
def roster_setup(tournament, make_teams):
    teams = make_teams(3)
    group_a = tournament.roster.add_group("A").id
    group_b = tournament.roster.add_group("B").id
    return tournament, teams, group_a, group_b


def test_assign_and_list(roster_setup):
    tournament, teams, group_a, _ = roster_setup
    tournament.assignments.assign(group_a, teams[1])
    tournament.assignments.assign(group_a, teams[0])
    assert tournament.assignments.teams_by_group(group_a) == [teams[0], teams[1]]
    assert [t.id for t in tournament.assignments.unassigned_teams()] == [teams[2]]


def test_team_belongs_to_one_group(roster_setup):
    tournament, teams, group_a, group_b = roster_setup
    tournament.assignments.assign(group_a, teams[0])

    with pytest.raises(TeamAlreadyAssignedError) as excinfo:
        tournament.assignments.assign(group_b, teams[0])

    assert excinfo.value.group_id == group_a
    assert tournament.assignments.teams_by_group(group_b) == []


def test_reassigning_same_group_is_idempotent(roster_setup):
    tournament, teams, group_a, _ = roster_setup
    first = tournament.assignments.assign(group_a, teams[0])
    second = tournament.assignments.assign(group_a, teams[0])
    assert first.id == second.id
    assert len(tournament.store.list_assignments()) == 1


def test_assign_unknown_entities(roster_setup):
    tournament, teams, group_a, _ = roster_setup
    with pytest.raises(EntityNotFoundError):
        tournament.assignments.assign(99, teams[0])
    with pytest.raises(EntityNotFoundError):
        tournament.assignments.assign(group_a, 99)


def test_remove_and_toggle(roster_setup):
    tournament, teams, group_a, group_b = roster_setup
    assert tournament.assignments.toggle(group_a, teams[0]) is True
    assert tournament.assignments.toggle(group_a, teams[0]) is False
    assert tournament.assignments.remove(group_a, teams[0]) is False

    tournament.assignments.assign(group_a, teams[0])
    assert tournament.assignments.remove(group_a, teams[0]) is True
    # Moving a team needs an explicit removal first
    tournament.assignments.assign(group_b, teams[0])
    with pytest.raises(TeamAlreadyAssignedError):
        tournament.assignments.toggle(group_a, teams[0])


def test_grid_hides_teams_of_other_groups(roster_setup):
    tournament, teams, group_a, group_b = roster_setup
    tournament.assignments.assign(group_a, teams[0])
    tournament.assignments.assign(group_b, teams[1])

    grid = {entry.group.name: entry for entry in tournament.assignments.groups_with_teams()}

    assert [c.team_id for c in grid["A"].teams] == [teams[0], teams[2]]
    assert grid["A"].assigned_team_ids == [teams[0]]
    assert [c.team_id for c in grid["B"].teams] == [teams[1], teams[2]]
    assert grid["B"].teams[0].label == "Carla / Dani"
    assert not grid["B"].teams[1].assigned
