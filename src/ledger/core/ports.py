# src/ledger/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task operations.

Operations depend on these Protocols instead of concrete classes, so tests
can swap in a fixed clock and predictable ids.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from ..tasks.task_models import Task

Clock = Callable[[], int]
# Returns the current time as whole seconds since the epoch.


class IdGenerator(Protocol):
    def new_id(self) -> str: ...


class TaskRepo(Protocol):
    def load(self) -> list[Task]: ...
    def append(self, task: Task) -> None: ...
    def rewrite_all(self, tasks: Iterable[Task]) -> None: ...
    def read_lines(self) -> list[str]: ...
