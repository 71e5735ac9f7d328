"""Tests for shuffle_roll_table."""

import random
from collections import Counter

from roll_tables import (
    GenerationOptions,
    RollEntry,
    RollTable,
    RollTableMetadata,
    generate_roll_table,
    get_roll_table_stats,
    shuffle_roll_table,
)

LATER = "2024-06-01T12:00:00+00:00"


def _pairs(table: RollTable) -> list[tuple]:
    return [(e.item_ref, e.custom_text) for e in table.entries]


def _distinct_table(die_size: int = 12) -> RollTable:
    pool = [f"item-{n}" for n in range(die_size)]
    return generate_roll_table(
        GenerationOptions(die_size=die_size, source_items=pool, allow_duplicates=False)
    )


def test_is_permutation(rng):
    table = generate_roll_table(
        GenerationOptions(die_size=20, source_items=["a", "b", "c"], allow_duplicates=True)
    )
    shuffled = shuffle_roll_table(table, rng)
    assert (
        get_roll_table_stats(shuffled).item_distribution
        == get_roll_table_stats(table).item_distribution
    )
    assert Counter(_pairs(shuffled)) == Counter(_pairs(table))


def test_roll_numbers_fixed(rng):
    table = _distinct_table()
    shuffled = shuffle_roll_table(table, rng)
    assert [e.roll for e in shuffled.entries] == list(range(1, 13))


def test_mapping_changes(rng):
    table = _distinct_table()
    assert _pairs(shuffle_roll_table(table, rng)) != _pairs(table)


def test_seeded_shuffle_is_repeatable():
    table = _distinct_table()
    first = shuffle_roll_table(table, random.Random(7))
    second = shuffle_roll_table(table, random.Random(7))
    assert _pairs(first) == _pairs(second)


def test_custom_text_travels_with_item(rng):
    table = RollTable(
        entries=[
            RollEntry(roll=1, item_ref="a", custom_text="with a"),
            RollEntry(roll=2, custom_text="text only"),
            RollEntry(roll=3),
            RollEntry(roll=4, item_ref="b"),
        ],
        metadata=RollTableMetadata(fill_strategy="auto"),
    )
    shuffled = shuffle_roll_table(table, rng)
    assert set(_pairs(shuffled)) == set(_pairs(table))


def test_single_entry_unchanged(rng):
    table = _distinct_table(1)
    assert _pairs(shuffle_roll_table(table, rng)) == _pairs(table)


def test_default_rng():
    table = _distinct_table()
    shuffled = shuffle_roll_table(table)
    assert Counter(_pairs(shuffled)) == Counter(_pairs(table))


def test_refreshes_timestamp(rng):
    table = _distinct_table()
    shuffled = shuffle_roll_table(table, rng, now=LATER)
    assert shuffled.metadata.generated_at == LATER
    assert shuffled.metadata.fill_strategy == table.metadata.fill_strategy


def test_input_not_mutated(rng):
    table = _distinct_table()
    before = _pairs(table)
    shuffle_roll_table(table, rng)
    assert _pairs(table) == before
