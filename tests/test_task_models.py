# tests/test_task_models.py

from __future__ import annotations

import json

import pytest

from ledger.errors import RecordParseError
from ledger.tasks.task_models import Task, TaskStatus


def _task(**kw) -> Task:
    base = dict(
        description="buy milk",
        opened_at=1_700_000_000,
        closed_at=0,
        task_id="3f786850e387550fdab836ed7e6dc881de23001b",
    )
    base.update(kw)
    return Task(**base)


def test_json_line_uses_wire_keys_in_order() -> None:
    line = _task().to_json_line()
    assert line == (
        '{"Desc":"buy milk","Opened":1700000000,"Closed":0,'
        '"TaskID":"3f786850e387550fdab836ed7e6dc881de23001b"}'
    )
    assert "\n" not in line


def test_round_trip_keeps_every_field() -> None:
    for task in (
        _task(),
        _task(closed_at=1_700_000_500),
        _task(description='quotes " and \\ and ünïcode\tand tabs'),
    ):
        assert Task.from_json_line(task.to_json_line()) == task


def test_status_follows_closed_at() -> None:
    assert _task().status is TaskStatus.OPEN
    assert _task().is_open
    closed = _task(closed_at=1_700_000_001)
    assert closed.status is TaskStatus.CLOSED
    assert str(closed.status) == "closed"


def test_missing_keys_take_zero_values_and_unknown_keys_are_ignored() -> None:
    task = Task.from_json_line(json.dumps({"Desc": "x", "Extra": [1, 2]}))
    assert task == Task(description="x", opened_at=0, closed_at=0, task_id="")


@pytest.mark.parametrize(
    "line",
    [
        "not json",
        "",
        "[1, 2, 3]",
        '"just a string"',
        '{"Desc": 5}',
        '{"Opened": "yesterday"}',
        '{"Closed": true}',
        '{"Opened": 1.5}',
        '{"TaskID": 1234}',
    ],
)
def test_malformed_records_are_rejected(line: str) -> None:
    with pytest.raises(RecordParseError):
        Task.from_json_line(line)
