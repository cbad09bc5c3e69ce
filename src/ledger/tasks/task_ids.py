# src/ledger/tasks/task_ids.py

from __future__ import annotations

import hashlib
import random
import time

# Width of the random draw that gets hashed into an id.
ID_DRAW_BITS = 64


class RandomTaskIdGenerator:
    """
    Produce SHA-1 hex task ids from a random draw.

    Ids are "unique enough" for prefix matching; nothing checks them against
    the store. Pass a seeded random.Random to get a reproducible sequence.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random(time.time_ns())

    def new_id(self) -> str:
        draw = self._rng.getrandbits(ID_DRAW_BITS)
        return hashlib.sha1(str(draw).encode("ascii")).hexdigest()
