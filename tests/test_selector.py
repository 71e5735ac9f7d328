"""Tests for entry selection."""

from roll_tables.models import GenerationOptions
from roll_tables.selector import select_entry, select_index, select_item

SEVEN = ["i0", "i1", "i2", "i3", "i4", "i5", "i6"]


# ── select_item ────────────────────────────────────────────


def test_empty_pool_selects_nothing():
    assert select_item(1, []) is None


def test_single_item_always_chosen():
    assert {select_item(r, ["only"]) for r in range(1, 30)} == {"only"}


def test_round_robin_up_to_six():
    pool = ["a", "b", "c", "d", "e", "f"]
    assert [select_item(r, pool) for r in range(1, 9)] == [
        "a", "b", "c", "d", "e", "f", "a", "b",
    ]


def test_spread_above_six():
    """Seven items: index is (roll * 31) % 7."""
    picks = [select_item(r, SEVEN) for r in range(1, 8)]
    assert picks == ["i3", "i6", "i2", "i5", "i1", "i4", "i0"]


def test_spread_is_deterministic():
    pool = [f"item-{n}" for n in range(25)]
    first = [select_item(r, pool) for r in range(1, 101)]
    second = [select_item(r, pool) for r in range(1, 101)]
    assert first == second


# ── select_index ───────────────────────────────────────────


def test_index_none_for_empty_pool():
    assert select_index(3, 0) is None


def test_index_matches_select_item():
    pool = [f"item-{n}" for n in range(11)]
    for roll in range(1, 40):
        assert pool[select_index(roll, len(pool))] == select_item(roll, pool)


# ── select_entry ───────────────────────────────────────────


def test_manual_entry_gets_placeholder():
    opts = GenerationOptions(die_size=4, source_items=["a"], fill_strategy="manual")
    entry = select_entry(2, opts, ["a"])
    assert entry.roll == 2
    assert entry.item_ref is None
    assert entry.custom_text == "Enter custom text or select an item"


def test_manual_placeholder_override():
    opts = GenerationOptions(
        die_size=4, fill_strategy="manual", placeholder_text="TBD",
    )
    assert select_entry(1, opts, []).custom_text == "TBD"


def test_blank_entry_is_empty():
    opts = GenerationOptions(die_size=4, source_items=["a"], fill_strategy="blank")
    assert select_entry(1, opts, ["a"]).is_empty


def test_auto_entry_draws_from_given_pool():
    opts = GenerationOptions(die_size=4, source_items=["a", "b"], allow_duplicates=False)
    assert select_entry(1, opts, ["b"]).item_ref == "b"


def test_auto_entry_empty_when_pool_exhausted():
    opts = GenerationOptions(die_size=4, source_items=["a", "b"], allow_duplicates=False)
    assert select_entry(3, opts, []).is_empty
