# src/ledger/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the ledger directory exists,
- wires the concrete store, id generator and clock into AppState.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..config import get_settings
from ..core.state import AppState, system_clock
from ..tasks.task_ids import RandomTaskIdGenerator
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, out: TextIO | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
        id_generator=RandomTaskIdGenerator(),
        clock=system_clock,
        out=out if out is not None else sys.stdout,
    )
    logger.debug("State ready tasks_path=%s", settings.tasks_path)
    return state
