import pytest

from padeltournament.controllers import PairingGenerator, group_assignments
from padeltournament.controllers.pairing import round_robin_count
from padeltournament.exceptions import NoAssignmentsError, ValidationError
from padeltournament.models import Pairing


def test_three_team_group_pairs_every_team_once():
    pairings = PairingGenerator().generate({1: [11, 12, 13]})
    assert [(p.team1_id, p.team2_id) for p in pairings] == [
        (11, 12),
        (11, 13),
        (12, 13),
    ]
    assert all(p.group_id == 1 for p in pairings)


@pytest.mark.parametrize("num_teams", [2, 3, 4, 5, 8])
def test_pairing_count_and_uniqueness(num_teams):
    teams = list(range(100, 100 + num_teams))
    pairings = PairingGenerator().generate({7: teams})

    assert len(pairings) == num_teams * (num_teams - 1) // 2
    assert len(pairings) == round_robin_count(num_teams)
    unordered = {frozenset((p.team1_id, p.team2_id)) for p in pairings}
    assert len(unordered) == len(pairings)
    assert all(p.team1_id != p.team2_id for p in pairings)


def test_no_cross_group_pairings():
    mapping = {1: [1, 2, 3], 2: [4, 5, 6, 7]}
    pairings = PairingGenerator().generate(mapping)

    assert len(pairings) == 3 + 6
    for pairing in pairings:
        members = mapping[pairing.group_id]
        assert pairing.team1_id in members
        assert pairing.team2_id in members


def test_generation_is_deterministic():
    mapping = {2: [5, 9, 1], 1: [3, 4]}
    generator = PairingGenerator()
    first = generator.generate(mapping)
    assert first == generator.generate(mapping)
    # Groups in mapping order, teams in input order
    assert first[0] == Pairing(2, 5, 9)
    assert first[-1] == Pairing(1, 3, 4)


def test_small_groups_contribute_nothing():
    pairings = PairingGenerator().generate({1: [1], 2: [2, 3]})
    assert pairings == [Pairing(2, 2, 3)]


@pytest.mark.parametrize("mapping", [{}, {1: []}, {1: [], 2: []}])
def test_no_assignments_raises(mapping):
    with pytest.raises(NoAssignmentsError):
        PairingGenerator().generate(mapping)


def test_team_listed_twice_in_group_rejected():
    with pytest.raises(ValidationError, match="twice"):
        PairingGenerator().generate({1: [1, 2, 1]})


def test_team_in_two_groups_rejected():
    with pytest.raises(ValidationError, match="groups 1 and 2"):
        PairingGenerator().generate({1: [1, 2], 2: [2, 3]})


def test_group_assignments_keeps_row_order():
    rows = [(2, 8), (1, 3), (2, 5), (1, 4)]
    assert group_assignments(rows) == {2: [8, 5], 1: [3, 4]}
    assert list(group_assignments(rows)) == [2, 1]
