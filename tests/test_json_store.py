import json

import pytest

from padeltournament.exceptions import (
    FileLoadException,
    FileSaveException,
    RecordNotFoundError,
)
from padeltournament.models import FinalType, MatchStatus
from padeltournament.storage import JsonFileStore
from padeltournament.tournament import Tournament


def _seed(tournament):
    players = [tournament.roster.add_player(n) for n in ("Ana", "Bea", "Carla", "Dani")]
    team1 = tournament.roster.add_team(players[0].id, players[1].id)
    team2 = tournament.roster.add_team(players[2].id, players[3].id)
    group = tournament.roster.add_group("Group A")
    tournament.assignments.assign(group.id, team1.id)
    tournament.assignments.assign(group.id, team2.id)
    tournament.start()
    return team1.id, team2.id


def test_missing_file_starts_empty(tmp_path):
    path = tmp_path / "new.json"
    store = JsonFileStore(path)
    assert store.list_players() == []
    assert not path.exists()


def test_changes_survive_reload(tmp_path):
    path = tmp_path / "cup.json"
    tournament = Tournament(JsonFileStore(path))
    team1, team2 = _seed(tournament)
    match = tournament.matches.list_matches()[0]
    tournament.matches.submit_score(match.id, 6, 4)
    tournament.finals.create_final(team1, team2, "final")

    reloaded = Tournament(JsonFileStore(path))

    stored = reloaded.matches.get_match(match.id)
    assert stored.status == MatchStatus.COMPLETED
    assert stored.winner_id == match.team1_id
    assert stored.created_at == match.created_at
    assert reloaded.roster.team_label(team1) == "Ana / Bea"
    records = {r.team_id: r for r in reloaded.ledger.records()}
    assert records[match.team1_id].games_won == 6
    assert records[match.team2_id].games_lost == 6
    assert reloaded.finals.list_finals()[0].type is FinalType.FINAL


def test_ids_continue_after_reload(tmp_path):
    path = tmp_path / "cup.json"
    store = JsonFileStore(path)
    tournament = Tournament(store)
    first = tournament.roster.add_player("Ana")
    second = tournament.roster.add_player("Bea")
    tournament.roster.delete_player(second.id)

    reloaded = Tournament(JsonFileStore(path))
    third = reloaded.roster.add_player("Carla")

    assert third.id == second.id + 1
    assert [p.id for p in reloaded.roster.list_players()] == [first.id, third.id]


def test_save_is_valid_json_without_temp_file(tmp_path):
    path = tmp_path / "cup.json"
    Tournament(JsonFileStore(path)).roster.add_player("Ana")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["version"] == 1
    assert data["players"][0]["name"] == "Ana"
    assert not (tmp_path / "cup.json.tmp").exists()


def test_one_write_per_outer_transaction(tmp_path, monkeypatch):
    store = JsonFileStore(tmp_path / "cup.json")
    flushes = []
    real_flush = store._flush
    monkeypatch.setattr(store, "_flush", lambda: (flushes.append(1), real_flush()))

    _seed(Tournament(store))
    count_after_seed = len(flushes)
    with store.transaction():
        Tournament(store).roster.add_player("Elena")
        Tournament(store).roster.add_player("Fran")

    assert len(flushes) == count_after_seed + 1


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        JsonFileStore(path)


def test_wrong_version_raises(tmp_path):
    path = tmp_path / "future.json"
    path.write_text(json.dumps({"version": 99}), encoding="utf-8")
    with pytest.raises(FileLoadException, match="version"):
        JsonFileStore(path)


def test_bad_row_raises(tmp_path):
    path = tmp_path / "rows.json"
    path.write_text(json.dumps({"version": 1, "teams": [{"id": 1}]}), encoding="utf-8")
    with pytest.raises(FileLoadException, match="Corrupt"):
        JsonFileStore(path)


def _break_saving(store, tmp_path):
    # A regular file where the save directory should be makes every write fail
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    good_path = store.path
    store.path = blocker / "cup.json"
    return good_path


def test_failed_save_leaves_result_unapplied(tmp_path):
    store = JsonFileStore(tmp_path / "cup.json")
    tournament = Tournament(store)
    _seed(tournament)
    match = tournament.matches.list_matches()[0]
    good_path = _break_saving(store, tmp_path)

    with pytest.raises(FileSaveException):
        tournament.matches.submit_score(match.id, 6, 3)

    assert tournament.matches.get_match(match.id).status == MatchStatus.PENDING
    assert all(r.matches_played == 0 for r in tournament.ledger.records())

    store.path = good_path
    completed = tournament.matches.submit_score(match.id, 6, 3)
    assert completed.is_completed
    reloaded = Tournament(JsonFileStore(good_path))
    assert reloaded.matches.get_match(match.id).score_display() == "6-3"


def test_failed_save_rolls_back_new_rows(tmp_path):
    store = JsonFileStore(tmp_path / "cup.json")
    tournament = Tournament(store)
    tournament.roster.add_player("Ana")
    _break_saving(store, tmp_path)

    with pytest.raises(FileSaveException):
        tournament.roster.add_player("Bea")

    assert [p.name for p in tournament.roster.list_players()] == ["Ana"]


def test_command_error_not_hidden_by_save_failure(tmp_path):
    store = JsonFileStore(tmp_path / "cup.json")
    tournament = Tournament(store)
    _seed(tournament)
    match = tournament.matches.list_matches()[0]
    tournament.ledger.clear()
    _break_saving(store, tmp_path)

    with pytest.raises(RecordNotFoundError):
        tournament.matches.submit_score(match.id, 6, 3)

    assert not tournament.matches.get_match(match.id).is_completed
