"""Roll-table generator.

Builds a complete table by folding over rolls 1..die_size. The accumulator
carries the entries built so far and the candidates still eligible, which
shrink as items are placed when ``allow_duplicates=False``. Once the pool is
exhausted the remaining rolls stay empty; the pool is never recycled.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from typing import NamedTuple

from .models import (
    GenerationOptions,
    InvalidDieSizeError,
    RollEntry,
    RollTable,
    RollTableMetadata,
    new_timestamp,
)
from .optimizer import optimize_roll_table_distribution
from .selector import select_entry, select_index

logger = logging.getLogger(__name__)

COMMON_DIE_SIZES: tuple[int, ...] = (4, 6, 8, 10, 12, 20, 100)


class _Fold(NamedTuple):
    entries: list[RollEntry]
    remaining: list[str]


def _discard(remaining: list[str], index: int, copies: Counter[str]) -> None:
    """Drop the placed candidate, along with any repeats of it in the pool."""
    item = remaining[index]
    if copies[item] > 1:
        remaining[:] = [other for other in remaining if other != item]
    else:
        del remaining[index]


def generate_roll_table(
    options: GenerationOptions, *, now: str | None = None
) -> RollTable:
    """Generate a table with one entry per face of the die.

    Raises InvalidDieSizeError when ``options.die_size`` is below 1.
    """
    if options.die_size < 1:
        raise InvalidDieSizeError(
            f"die_size must be at least 1, got {options.die_size}"
        )

    copies = Counter(options.source_items)

    def step(acc: _Fold, roll: int) -> _Fold:
        if options.allow_duplicates:
            acc.entries.append(select_entry(roll, options, options.source_items))
            return acc
        entry = select_entry(roll, options, acc.remaining)
        if entry.item_ref:
            _discard(acc.remaining, select_index(roll, len(acc.remaining)), copies)
        acc.entries.append(entry)
        return acc

    start = _Fold(entries=[], remaining=list(options.source_items))
    result = reduce(step, range(1, options.die_size + 1), start)
    logger.debug(
        "generated d%d table strategy=%s pool=%d placed=%d",
        options.die_size, options.fill_strategy, len(options.source_items),
        sum(1 for e in result.entries if e.item_ref),
    )
    return RollTable(
        entries=result.entries,
        metadata=RollTableMetadata(
            generated_at=now or new_timestamp(),
            source_list_name=options.source_list_name,
            fill_strategy=options.fill_strategy,
        ),
    )


def recommended_die_size(
    item_count: int, die_sizes: Sequence[int] = COMMON_DIE_SIZES
) -> int:
    """Smallest die with at least one face per item, else the largest die.

    recommended_die_size(5)  → 6
    recommended_die_size(40) → 100
    """
    ordered = sorted(die_sizes)
    if not ordered:
        raise InvalidDieSizeError("No die sizes configured")
    for size in ordered:
        if item_count <= size:
            return size
    return ordered[-1]


def create_balanced_roll_table(
    source_items: Sequence[str],
    die_size: int,
    *,
    source_list_name: str | None = None,
    now: str | None = None,
) -> RollTable:
    """Auto-fill a table, then run the optimizer over the result.

    Duplicates are only allowed when the pool is too small to cover the die.
    """
    options = GenerationOptions(
        die_size=die_size,
        source_items=list(source_items),
        fill_strategy="auto",
        allow_duplicates=len(source_items) < die_size,
        source_list_name=source_list_name,
    )
    table = generate_roll_table(options, now=now)
    return optimize_roll_table_distribution(table, source_items, now=now)
