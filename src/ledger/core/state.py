# src/ledger/core/state.py

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

from .ports import Clock, IdGenerator, TaskRepo


def system_clock() -> int:
    return int(time.time())


@dataclass
class AppState:
    # Settings object (ledger.config.Settings or a test stand-in).
    settings: object

    task_store: TaskRepo
    id_generator: IdGenerator
    clock: Clock = system_clock
    out: TextIO = field(default_factory=lambda: sys.stdout)

    def now(self) -> int:
        return int(self.clock())
