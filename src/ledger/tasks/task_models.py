# src/ledger/tasks/task_models.py

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..errors import RecordParseError

# Wire keys of one stored record, in serialization order.
KEY_DESC = "Desc"
KEY_OPENED = "Opened"
KEY_CLOSED = "Closed"
KEY_TASK_ID = "TaskID"


class TaskStatus(StrEnum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass(slots=True)
class Task:
    """
    One ledger record.

    closed_at == 0 means the task is still open.
    """

    description: str
    opened_at: int
    closed_at: int
    task_id: str

    @property
    def is_open(self) -> bool:
        return self.closed_at == 0

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.OPEN if self.is_open else TaskStatus.CLOSED

    # ---- record codec ----

    def to_record(self) -> dict[str, Any]:
        return {
            KEY_DESC: self.description,
            KEY_OPENED: self.opened_at,
            KEY_CLOSED: self.closed_at,
            KEY_TASK_ID: self.task_id,
        }

    def to_json_line(self) -> str:
        """Serialize as a single compact JSON line (no trailing newline)."""
        return json.dumps(self.to_record(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_record(cls, data: Any) -> Task:
        """
        Build a Task from a decoded record.

        Missing keys take their zero value; unknown keys are ignored.
        Wrong types are rejected.
        """
        if not isinstance(data, dict):
            raise RecordParseError(f"expected a JSON object, got {type(data).__name__}")

        return cls(
            description=_str_field(data, KEY_DESC),
            opened_at=_int_field(data, KEY_OPENED),
            closed_at=_int_field(data, KEY_CLOSED),
            task_id=_str_field(data, KEY_TASK_ID),
        )

    @classmethod
    def from_json_line(cls, line: str) -> Task:
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordParseError(f"invalid JSON: {e.msg}") from e
        return cls.from_record(data)


def _str_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordParseError(f"field {key} must be a string")
    return value


def _int_field(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass; a stored true/false is not a timestamp.
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordParseError(f"field {key} must be an integer")
    return value
