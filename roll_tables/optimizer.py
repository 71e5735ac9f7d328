"""Distribution optimizer: fills empty rolls from the source pool.

Empty entries are filled first with pool items that never appear in the
table, then with items placed fewer than ``total_rolls // pool_size`` times.
Each candidate is used at most once per pass and candidates are taken in
pool order. Filled entries and roll numbers never change.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from .models import RollTable, new_timestamp

logger = logging.getLogger(__name__)


def optimize_roll_table_distribution(
    table: RollTable, source_items: Sequence[str], *, now: str | None = None
) -> RollTable:
    entries = list(table.entries)
    empty_slots = [i for i, entry in enumerate(entries) if entry.is_empty]
    counts = Counter(e.item_ref for e in entries if e.item_ref)

    candidates: list[str] = []
    if source_items:
        target = len(entries) // len(source_items)
        unused = [item for item in source_items if counts[item] == 0]
        underrepresented = [item for item in source_items if counts[item] < target]
        candidates = unused + underrepresented

    for slot, item in zip(empty_slots, candidates):
        entries[slot] = entries[slot].model_copy(update={"item_ref": item})

    filled = min(len(empty_slots), len(candidates))
    if filled < len(empty_slots):
        logger.warning(
            "optimizer left %d of %d empty rolls unfilled",
            len(empty_slots) - filled, len(empty_slots),
        )
    logger.debug("optimizer filled %d rolls from pool of %d", filled, len(source_items))

    return RollTable(
        entries=entries,
        metadata=table.metadata.model_copy(
            update={"generated_at": now or new_timestamp()}
        ),
    )
