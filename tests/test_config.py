# tests/test_config.py

from __future__ import annotations

import os
from pathlib import Path

import pytest

from ledger.config import Settings


@pytest.fixture()
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    for suffix in ("APP_NAME", "LOG_LEVEL", "LOG_FILE", "DATA_DIR", "TASKS_PATH", "REPORT_DAYS"):
        monkeypatch.delenv(f"LEDGER_{suffix}", raising=False)
    return tmp_path


def test_defaults_live_under_home(clean_env: Path) -> None:
    s = Settings.from_env(load_env_file=False)

    assert s.data_dir == clean_env / ".goledger"
    assert s.tasks_path == clean_env / ".goledger" / "tasks.json"
    assert s.log_path == clean_env / ".goledger" / "ledger.log"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.report_days == 7


def test_env_overrides(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGER_DATA_DIR", str(clean_env / "elsewhere"))
    monkeypatch.setenv("LEDGER_TASKS_PATH", str(clean_env / "t.jsonl"))
    monkeypatch.setenv("LEDGER_LOG_FILE", "off")
    monkeypatch.setenv("LEDGER_REPORT_DAYS", "14")

    s = Settings.from_env(load_env_file=False)

    assert s.data_dir == clean_env / "elsewhere"
    assert s.tasks_path == clean_env / "t.jsonl"
    assert s.log_path == clean_env / "elsewhere" / "ledger.log"
    assert s.log_to_file is False
    assert s.report_days == 14


def test_malformed_int_falls_back(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGER_REPORT_DAYS", "a week")
    assert Settings.from_env(load_env_file=False).report_days == 7


def test_dotenv_file_is_loaded(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (clean_env / ".env").write_text("LEDGER_REPORT_DAYS=3\n", "utf-8")
    monkeypatch.chdir(clean_env)

    try:
        assert Settings.from_env().report_days == 3
    finally:
        # load_dotenv writes straight into os.environ.
        os.environ.pop("LEDGER_REPORT_DAYS", None)


def test_dotenv_does_not_override_real_env(clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (clean_env / ".env").write_text("LEDGER_REPORT_DAYS=3\n", "utf-8")
    monkeypatch.chdir(clean_env)
    monkeypatch.setenv("LEDGER_REPORT_DAYS", "10")

    assert Settings.from_env().report_days == 10
