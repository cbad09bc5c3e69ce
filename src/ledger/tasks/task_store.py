# src/ledger/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from ..errors import RecordParseError, StoreNotFoundError, StoreReadError, WriteFailureError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Line-delimited JSON task store: one serialized Task per line.

    File order is insertion order. Mutations other than append re-materialize
    the whole file (write to a sibling temp file, then os.replace over the
    store file), so a crash mid-write never leaves a truncated store.

    Not safe for concurrent writers: a rewrite racing another process can
    drop that process's records.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    # ---- read ----

    def read_lines(self) -> list[str]:
        """
        Raw stored lines without their line terminators (no parsing).

        Bytes that are not valid UTF-8 decode to U+FFFD instead of failing.
        """
        try:
            with open(self._path, encoding="utf-8", errors="replace") as f:
                return [line.rstrip("\r\n") for line in f]
        except FileNotFoundError as e:
            raise StoreNotFoundError(self._path) from e
        except OSError as e:
            raise StoreReadError(f"could not read task file {self._path}: {e}") from e

    def load(self) -> list[Task]:
        tasks: list[Task] = []
        for line_no, line in enumerate(self.read_lines(), start=1):
            try:
                tasks.append(Task.from_json_line(line))
            except RecordParseError as e:
                raise RecordParseError(f"error parsing task record: {e}", line_no=line_no) from e
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    # ---- write ----

    def _ensure_dir(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WriteFailureError(f"could not create directory {self._path.parent}: {e}") from e

    def append(self, task: Task) -> None:
        self._ensure_dir()
        try:
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(task.to_json_line() + "\n")
                f.flush()
        except OSError as e:
            raise WriteFailureError(f"could not write task file {self._path}: {e}") from e
        logger.debug("Task appended id=%s path=%s", task.task_id, self._path)

    def rewrite_all(self, tasks: Iterable[Task]) -> None:
        """Replace the store contents with `tasks`, in the given order."""
        self._ensure_dir()
        tmp = self._path.with_name(self._path.name + ".tmp")
        count = 0
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                if self._path.is_file():
                    # Keep the permissions the user gave the store file.
                    shutil.copymode(self._path, tmp)
                for task in tasks:
                    f.write(task.to_json_line() + "\n")
                    count += 1
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise WriteFailureError(f"could not rewrite task file {self._path}: {e}") from e
        logger.debug("Rewrote %s with %d tasks", self._path, count)
