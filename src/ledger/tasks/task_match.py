# src/ledger/tasks/task_match.py

from __future__ import annotations

from collections.abc import Sequence

from ..errors import AmbiguousMatchError, NoMatchError
from .task_models import Task


def resolve_prefix(prefix: str, tasks: Sequence[Task]) -> int:
    """
    Resolve a (case-sensitive) task id prefix to the index of exactly one task.

    Tasks whose id is shorter than the prefix cannot match and are skipped.
    Raises NoMatchError or AmbiguousMatchError otherwise.
    """
    matches = [
        i
        for i, task in enumerate(tasks)
        if len(task.task_id) >= len(prefix) and task.task_id.startswith(prefix)
    ]

    if not matches:
        raise NoMatchError(prefix)
    if len(matches) > 1:
        raise AmbiguousMatchError(prefix, len(matches))
    return matches[0]
