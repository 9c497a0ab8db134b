import pytest

from padeltournament.cli import main
from padeltournament.constants import (
    EXIT_INTEGRITY_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USER_ERROR,
)
from padeltournament.shell import create_completer, handle_line
from padeltournament.storage import JsonFileStore
from padeltournament.tournament import Tournament


@pytest.fixture
def padel(tmp_path, monkeypatch):
    monkeypatch.delenv("PADEL_DATA_FILE", raising=False)
    monkeypatch.delenv("PADEL_LOG_LEVEL", raising=False)
    data_file = str(tmp_path / "cup.json")

    def run(*args):
        return main(["--data-file", data_file, *args])

    run.data_file = data_file
    return run


def _seed(padel):
    for name in ("Ana", "Bea", "Carla", "Dani", "Elena", "Fran"):
        assert padel("player", "add", name) == EXIT_OK
    for first, second in ((1, 2), (3, 4), (5, 6)):
        assert padel("team", "add", str(first), str(second)) == EXIT_OK
    assert padel("group", "add", "Group A") == EXIT_OK
    for team_id in ("1", "2", "3"):
        assert padel("assign", "1", team_id) == EXIT_OK


def test_full_group_stage(padel, capsys):
    _seed(padel)
    assert padel("start") == EXIT_OK
    assert "3 matches" in capsys.readouterr().out

    assert padel("score", "1", "6", "3") == EXIT_OK
    assert "winner Ana / Bea" in capsys.readouterr().out

    assert padel("standings") == EXIT_OK
    out = capsys.readouterr().out
    assert "Group A" in out
    assert "+3" in out

    assert padel("matches", "--status", "pending") == EXIT_OK
    out = capsys.readouterr().out
    assert "Carla / Dani" in out
    assert "completed" not in out


def test_invalid_score_is_user_error(padel, capsys):
    _seed(padel)
    padel("start")
    capsys.readouterr()

    assert padel("score", "1", "6", "6") == EXIT_USER_ERROR
    assert "cannot be equal" in capsys.readouterr().err
    assert padel("score", "1", "5", "4") == EXIT_USER_ERROR


def test_duplicate_score_rejected(padel, capsys):
    _seed(padel)
    padel("start")
    assert padel("score", "2", "6", "1") == EXIT_OK
    assert padel("score", "2", "1", "6") == EXIT_USER_ERROR
    assert "already completed" in capsys.readouterr().err


def test_missing_standing_is_integrity_error(padel, capsys):
    _seed(padel)
    padel("start")
    assert padel("reset-standings") == EXIT_OK

    assert padel("score", "1", "6", "2") == EXIT_INTEGRITY_ERROR
    assert "Integrity error" in capsys.readouterr().err
    match = Tournament(JsonFileStore(padel.data_file)).matches.get_match(1)
    assert not match.is_completed


def test_assign_to_second_group_fails(padel, capsys):
    _seed(padel)
    padel("group", "add", "Group B")
    assert padel("assign", "2", "1") == EXIT_USER_ERROR
    assert "already assigned" in capsys.readouterr().err


def test_grid_and_finals(padel, capsys):
    _seed(padel)
    assert padel("grid") == EXIT_OK
    assert "[x]" in capsys.readouterr().out

    assert padel("final", "add", "final", "1", "2") == EXIT_OK
    assert padel("final", "score", "1", "7", "5") == EXIT_OK
    assert padel("final", "list") == EXIT_OK
    out = capsys.readouterr().out
    assert "Final" in out
    assert "7-5" in out


def test_summary(padel, capsys):
    _seed(padel)
    assert padel("summary") == EXIT_OK
    out = capsys.readouterr().out
    assert "players" in out
    assert "assigned_teams" in out


def test_bad_settings_file(padel, tmp_path):
    assert padel("--config", str(tmp_path / "missing.json"), "summary") == EXIT_USER_ERROR


def test_keyboard_interrupt(padel, monkeypatch):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr("padeltournament.cli.execute", interrupted)
    assert padel("summary") == EXIT_INTERRUPTED


def test_shell_lines(tmp_path, capsys):
    tournament = Tournament(JsonFileStore(tmp_path / "shell.json"))

    assert handle_line(tournament, 'player add "Ana Maria"') == EXIT_OK
    assert handle_line(tournament, "player list") == EXIT_OK
    assert "Ana Maria" in capsys.readouterr().out

    assert handle_line(tournament, "") is None
    assert handle_line(tournament, "help") is None
    assert handle_line(tournament, "dance") is None
    assert handle_line(tournament, "score one two three") is None
    assert "Unknown command" in capsys.readouterr().out


def test_completer_knows_commands():
    completer = create_completer()
    assert "score" in completer.options
    assert "help" in completer.options
