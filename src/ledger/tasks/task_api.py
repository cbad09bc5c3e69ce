# src/ledger/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from ..errors import EmptyInputError, UnknownFormatError
from .task_match import resolve_prefix
from .task_models import Task
from .task_render import format_columns, format_timestamp, short_id

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400
DEFAULT_REPORT_DAYS = 7

DUMP_FORMATS = ("text", "json", "yaml")

LIST_HEADER = ("ID", "OPENED", "STATUS", "TASK")


def _emit(state: AppState, lines: list[str]) -> None:
    for line in lines:
        print(line, file=state.out)
    state.out.flush()


def add_task(state: AppState, description: str, *, auto_close: bool = False) -> Task:
    """
    Create a task and append it to the store.

    With auto_close the task is recorded as already closed, at the same
    instant it was opened.
    """
    if not description or not description.strip():
        raise EmptyInputError("missing required task description.")

    now = state.now()
    task = Task(
        description=description,
        opened_at=now,
        closed_at=now if auto_close else 0,
        task_id=state.id_generator.new_id(),
    )
    state.task_store.append(task)
    logger.info("Task added id=%s closed=%s", task.task_id, auto_close)
    return task


def select_tasks(tasks: list[Task], *, show_all: bool = False) -> list[Task]:
    if show_all:
        return list(tasks)
    return [t for t in tasks if t.is_open]


def list_tasks(state: AppState, *, long_id: bool = False, show_all: bool = False) -> list[Task]:
    """Print open tasks (or all tasks with show_all) as an aligned table."""
    shown = select_tasks(state.task_store.load(), show_all=show_all)

    rows: list[tuple[str, ...]] = [LIST_HEADER]
    for task in shown:
        rows.append(
            (
                task.task_id if long_id else short_id(task.task_id),
                format_timestamp(task.opened_at),
                task.status.value,
                task.description,
            )
        )
    _emit(state, format_columns(rows))
    return shown


def close_task(state: AppState, id_prefix: str) -> Task:
    """
    Mark the task matching `id_prefix` as closed now.

    Closing an already closed task moves its close time to now.
    """
    tasks = state.task_store.load()
    idx = resolve_prefix(id_prefix, tasks)
    task = tasks[idx]
    task.closed_at = state.now()
    state.task_store.rewrite_all(tasks)
    logger.info("Task closed id=%s", task.task_id)
    return task


def remove_task(state: AppState, id_prefix: str) -> Task:
    tasks = state.task_store.load()
    idx = resolve_prefix(id_prefix, tasks)
    removed = tasks.pop(idx)
    state.task_store.rewrite_all(tasks)
    logger.info("Task removed id=%s", removed.task_id)
    return removed


def report_tasks(state: AppState, *, days: int = DEFAULT_REPORT_DAYS) -> list[Task]:
    """
    Print every task closed within the last `days` days as a dash-prefixed line.

    Open tasks have closed_at == 0, which is always before the cutoff.
    """
    cutoff = state.now() - days * SECONDS_PER_DAY
    done = [t for t in state.task_store.load() if t.closed_at > cutoff]
    _emit(state, format_columns(("-", t.description) for t in done))
    return done


def dump_tasks(state: AppState, *, fmt: str = "text") -> None:
    """
    Echo the raw store contents.

    Only "text" produces output; "json" and "yaml" are accepted but not
    implemented yet.
    """
    if fmt not in DUMP_FORMATS:
        raise UnknownFormatError(fmt)

    lines = state.task_store.read_lines()
    if fmt != "text":
        logger.debug("dump format %s is not implemented; %d lines skipped", fmt, len(lines))
        return
    _emit(state, lines)
