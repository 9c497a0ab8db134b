import logging
import threading
from dataclasses import replace

import pytest

from padeltournament.controllers import StandingsLedger
from padeltournament.exceptions import (
    AlreadyInitializedError,
    EntityNotFoundError,
    NoAssignmentsError,
    RecordNotFoundError,
    ValidationError,
)
from padeltournament.models import Assignment


def _record(ledger, team_id):
    return next(r for r in ledger.records() if r.team_id == team_id)


def _counts(record):
    return (
        record.matches_played,
        record.matches_won,
        record.matches_lost,
        record.games_won,
        record.games_lost,
    )


@pytest.fixture
def ledger(store):
    ledger = StandingsLedger(store)
    ledger.initialize([(1, 1), (1, 2), (1, 3), (2, 4), (2, 5)])
    return ledger


def test_initialize_creates_zeroed_records(store):
    ledger = StandingsLedger(store)
    created = ledger.initialize([(1, 1), (1, 2), (2, 3)])

    assert len(created) == 3
    assert {(r.group_id, r.team_id) for r in created} == {(1, 1), (1, 2), (2, 3)}
    assert all(_counts(r) == (0, 0, 0, 0, 0) for r in created)
    assert ledger.is_initialized()


def test_initialize_accepts_assignment_objects(store):
    ledger = StandingsLedger(store)
    created = ledger.initialize([Assignment(group_id=4, team_id=9)])
    assert [(r.group_id, r.team_id) for r in created] == [(4, 9)]


def test_initialize_reads_store_assignments(store):
    store.add_assignment(Assignment(group_id=1, team_id=1))
    store.add_assignment(Assignment(group_id=1, team_id=2))
    created = StandingsLedger(store).initialize()
    assert sorted(r.team_id for r in created) == [1, 2]


def test_initialize_without_assignments_raises(store):
    ledger = StandingsLedger(store)
    with pytest.raises(NoAssignmentsError):
        ledger.initialize([])
    with pytest.raises(NoAssignmentsError):
        ledger.initialize()
    assert not ledger.is_initialized()


def test_second_initialize_raises_and_creates_nothing(ledger, store):
    before = store.list_standing_records()

    with pytest.raises(AlreadyInitializedError):
        ledger.initialize([(1, 1), (1, 2), (3, 7)])

    assert store.list_standing_records() == before


def test_win_updates_both_records(ledger):
    ledger.apply_result(1, 1, 6, 2, 3)

    assert _counts(_record(ledger, 1)) == (1, 1, 0, 6, 3)
    assert _counts(_record(ledger, 2)) == (1, 0, 1, 3, 6)
    assert _counts(_record(ledger, 3)) == (0, 0, 0, 0, 0)


def test_winner_taken_from_higher_score_regardless_of_side(ledger):
    updated_a, updated_b = ledger.apply_result(1, 1, 2, 2, 6)
    assert updated_a.matches_lost == 1
    assert updated_b.matches_won == 1


def test_played_equals_won_plus_lost_after_sequence(ledger):
    results = [
        (1, 1, 6, 2, 4),
        (1, 1, 3, 3, 6),
        (1, 2, 7, 3, 5),
        (2, 4, 6, 5, 0),
    ]
    for result in results:
        ledger.apply_result(*result)
        for record in ledger.records():
            assert record.matches_played == record.matches_won + record.matches_lost

    assert _counts(_record(ledger, 1)) == (2, 1, 1, 9, 10)
    assert _counts(_record(ledger, 3)) == (2, 1, 1, 11, 10)
    assert _counts(_record(ledger, 5)) == (1, 0, 1, 0, 6)


def test_tied_result_rejected(ledger):
    with pytest.raises(ValidationError):
        ledger.apply_result(1, 1, 6, 2, 6)
    assert _counts(_record(ledger, 1)) == (0, 0, 0, 0, 0)


def test_team_cannot_play_itself(ledger):
    with pytest.raises(ValidationError):
        ledger.apply_result(1, 1, 6, 1, 3)


def test_missing_record_is_integrity_failure(ledger, caplog):
    with caplog.at_level(logging.CRITICAL):
        with pytest.raises(RecordNotFoundError) as excinfo:
            ledger.apply_result(1, 1, 6, 4, 2)

    assert excinfo.value.group_id == 1
    assert excinfo.value.team_ids == (4,)
    assert any(r.levelno == logging.CRITICAL for r in caplog.records)
    # Team 1's record was not touched
    assert _counts(_record(ledger, 1)) == (0, 0, 0, 0, 0)


def test_clear_removes_everything(ledger):
    assert ledger.clear() == 5
    assert not ledger.is_initialized()
    assert ledger.records() == []
    ledger.initialize([(1, 1), (1, 2)])
    assert len(ledger.records()) == 2


def test_update_with_unknown_record_writes_nothing(ledger, store):
    before = _record(ledger, 1)
    stranger = replace(before, id=999)

    with pytest.raises(EntityNotFoundError):
        store.update_standing_records([before.with_result(6, 3), stranger])

    assert _counts(_record(ledger, 1)) == (0, 0, 0, 0, 0)


def test_error_inside_transaction_undoes_result(ledger, store):
    with pytest.raises(RuntimeError):
        with store.transaction():
            ledger.apply_result(1, 1, 6, 2, 3)
            raise RuntimeError("abort")

    assert _counts(_record(ledger, 1)) == (0, 0, 0, 0, 0)
    assert _counts(_record(ledger, 2)) == (0, 0, 0, 0, 0)


def test_readers_never_see_half_applied_result(ledger):
    done = threading.Event()
    snapshots = []

    def read():
        while not done.is_set():
            snapshots.append(ledger.records())

    reader = threading.Thread(target=read)
    reader.start()
    try:
        for _ in range(50):
            ledger.apply_result(1, 1, 6, 2, 4)
            ledger.apply_result(2, 5, 6, 4, 1)
    finally:
        done.set()
        reader.join()
    snapshots.append(ledger.records())

    for records in snapshots:
        for record in records:
            assert record.matches_played == record.matches_won + record.matches_lost
        assert sum(r.matches_won for r in records) == sum(
            r.matches_lost for r in records
        )
        assert sum(r.games_won for r in records) == sum(r.games_lost for r in records)
        by_team = {r.team_id: r.matches_played for r in records}
        assert by_team[1] == by_team[2]
        assert by_team[4] == by_team[5]
    assert _record(ledger, 1).matches_played == 50


def test_records_filtered_by_group(ledger):
    assert [r.team_id for r in ledger.records(2)] == [4, 5]
    assert len(ledger.records()) == 5
