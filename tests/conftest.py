import pytest

from padeltournament.storage import InMemoryStore
from padeltournament.tournament import Tournament

PLAYER_NAMES = [
    "Ana",
    "Bea",
    "Carla",
    "Dani",
    "Elena",
    "Fran",
    "Gema",
    "Hugo",
    "Ines",
    "Juan",
    "Kike",
    "Lola",
]


def build_teams(tournament, count):
    """Create ``count`` two-player teams and return their ids."""
    team_ids = []
    for index in range(count):
        first = tournament.roster.add_player(PLAYER_NAMES[2 * index])
        second = tournament.roster.add_player(PLAYER_NAMES[2 * index + 1])
        team_ids.append(tournament.roster.add_team(first.id, second.id).id)
    return team_ids


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def tournament(store):
    return Tournament(store)


@pytest.fixture
def seeded(tournament):
    """Two groups: A with three teams, B with two. Not started yet."""
    teams = build_teams(tournament, 5)
    group_a = tournament.roster.add_group("Group A")
    group_b = tournament.roster.add_group("Group B")
    for team_id in teams[:3]:
        tournament.assignments.assign(group_a.id, team_id)
    for team_id in teams[3:]:
        tournament.assignments.assign(group_b.id, team_id)
    tournament.group_a = group_a.id
    tournament.group_b = group_b.id
    tournament.team_ids = teams
    return tournament


@pytest.fixture
def started(seeded):
    seeded.start()
    return seeded


@pytest.fixture
def make_teams(tournament):
    def make(count):
        return build_teams(tournament, count)

    return make
