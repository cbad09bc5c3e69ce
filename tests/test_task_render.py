# tests/test_task_render.py

from __future__ import annotations

from ledger.tasks.task_render import format_columns, short_id


def test_short_id_keeps_seven_chars_and_marker() -> None:
    assert short_id("0123456789abcdef") == "0123456.."
    assert short_id("abc") == "abc.."


def test_format_columns_pads_all_but_last_column() -> None:
    lines = format_columns([("ID", "TASK"), ("abcdefgh", "x"), ("a", "longer text")])
    assert lines == [
        "ID        TASK",
        "abcdefgh  x",
        "a         longer text",
    ]


def test_format_columns_empty() -> None:
    assert format_columns([]) == []
