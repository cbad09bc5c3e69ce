# src/ledger/tasks/task_render.py

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

# Number of id characters shown by `ls` without -l.
SHORT_ID_LEN = 7
SHORT_ID_MARKER = ".."
COLUMN_PADDING = 2


def short_id(task_id: str) -> str:
    return f"{task_id[:SHORT_ID_LEN]}{SHORT_ID_MARKER}"


def format_timestamp(ts: int) -> str:
    """Seconds since epoch as local wall-clock time."""
    return datetime.fromtimestamp(ts).astimezone().strftime("%Y-%m-%d %H:%M:%S")


def format_columns(rows: Iterable[Sequence[str]], *, padding: int = COLUMN_PADDING) -> list[str]:
    """
    Left-align cells into columns.

    Every column except the last is padded to its widest cell plus `padding`
    spaces; the last cell is written as-is so lines carry no trailing blanks.
    """
    table = [list(r) for r in rows]
    if not table:
        return []

    ncols = max(len(r) for r in table)
    widths = [0] * ncols
    for r in table:
        for i, cell in enumerate(r[:-1]):
            widths[i] = max(widths[i], len(cell))

    lines: list[str] = []
    for r in table:
        parts = [cell.ljust(widths[i] + padding) for i, cell in enumerate(r[:-1])]
        parts.append(r[-1] if r else "")
        lines.append("".join(parts))
    return lines
