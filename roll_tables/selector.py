"""Entry selection: decides what occupies a single roll.

Selection for the ``auto`` strategy is deterministic: the same roll and the
same pool always produce the same item, so a preview can be regenerated
without being saved and still look identical.

    pool size 0      → empty entry
    pool size 1      → that item
    pool size 2..6   → round robin, pool[(roll - 1) % size]
    pool size > 6    → spread, pool[(roll * 31) % size]

The spread rule is a cheap multiplicative hash, not a random draw.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import GenerationOptions, RollEntry

ROUND_ROBIN_LIMIT = 6
SPREAD_MULTIPLIER = 31


def select_index(roll: int, pool_size: int) -> int | None:
    """Position in a pool of ``pool_size`` candidates chosen for ``roll``."""
    if pool_size < 1:
        return None
    if pool_size == 1:
        return 0
    if pool_size <= ROUND_ROBIN_LIMIT:
        return (roll - 1) % pool_size
    return (roll * SPREAD_MULTIPLIER) % pool_size


def select_item(roll: int, pool: Sequence[str]) -> str | None:
    """Pick the pool item for ``roll``, or None when the pool is empty."""
    index = select_index(roll, len(pool))
    return None if index is None else pool[index]


def select_entry(
    roll: int, options: GenerationOptions, pool: Sequence[str]
) -> RollEntry:
    """Build the entry for ``roll`` under the options' fill strategy.

    ``pool`` is the candidates still eligible for this roll. For tables that
    disallow duplicates the generator narrows it as items are placed.
    """
    if options.fill_strategy == "manual":
        return RollEntry(roll=roll, custom_text=options.placeholder_text)
    if options.fill_strategy == "blank":
        return RollEntry(roll=roll)
    return RollEntry(roll=roll, item_ref=select_item(roll, pool))
