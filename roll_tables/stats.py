"""Aggregate statistics over a roll table. Read-only; no validation."""

from __future__ import annotations

from collections import Counter

from .models import RollTable, RollTableStats


def item_distribution(table: RollTable) -> dict[str, int]:
    """Occurrences of each item ref, in order of first appearance."""
    return dict(Counter(e.item_ref for e in table.entries if e.item_ref))


def get_roll_table_stats(table: RollTable) -> RollTableStats:
    total = len(table.entries)
    filled = sum(1 for e in table.entries if not e.is_empty)
    distribution = item_distribution(table)
    return RollTableStats(
        total_rolls=total,
        filled_rolls=filled,
        empty_rolls=total - filled,
        unique_item_count=len(distribution),
        item_distribution=distribution,
        completion_percentage=(filled / total * 100) if total else 0.0,
    )
