"""Shuffle which roll maps to which assignment, keeping roll numbers fixed."""

from __future__ import annotations

import logging
import random

from .models import RollTable, new_timestamp

logger = logging.getLogger(__name__)


def shuffle_roll_table(
    table: RollTable, rng: random.Random | None = None, *, now: str | None = None
) -> RollTable:
    """Return a copy of ``table`` with its (item_ref, custom_text) pairs permuted.

    Uses a Fisher–Yates shuffle driven by ``rng``. Pass a seeded
    ``random.Random`` for reproducible output; when omitted a fresh unseeded
    instance is used rather than the module-level generator.
    """
    rng = rng or random.Random()
    assignments = [(e.item_ref, e.custom_text) for e in table.entries]

    for i in range(len(assignments) - 1, 0, -1):
        j = rng.randrange(i + 1)
        assignments[i], assignments[j] = assignments[j], assignments[i]

    entries = [
        entry.model_copy(update={"item_ref": item_ref, "custom_text": custom_text})
        for entry, (item_ref, custom_text) in zip(table.entries, assignments)
    ]
    logger.debug("shuffled %d entries", len(entries))
    return RollTable(
        entries=entries,
        metadata=table.metadata.model_copy(
            update={"generated_at": now or new_timestamp()}
        ),
    )
