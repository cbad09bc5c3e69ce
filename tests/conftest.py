# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest

from ledger.core.state import AppState
from ledger.tasks.task_store import TaskStore

from .fakes import FakeClock, SequenceIdGenerator


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / ".goledger"
    return SimpleNamespace(
        app_name="ledger-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        log_path=data_dir / "ledger.log",
        report_days=7,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def ids() -> SequenceIdGenerator:
    return SequenceIdGenerator()


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings, store, ids, clock) -> AppState:
    """
    AppState wired with a real file store, a fake clock and predictable ids.

    Output goes to a StringIO; read it back with `state.out.getvalue()`.
    """
    return AppState(
        settings=settings,
        task_store=store,
        id_generator=ids,
        clock=clock,
        out=io.StringIO(),
    )
