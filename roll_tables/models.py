"""Core domain models.

Every generator, post-processor and exporter operates on these types.
Pydantic is used for validation and serialisation at every data boundary.
Models are frozen: transformations build a new table instead of editing one.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

FillStrategy = Literal["auto", "manual", "blank"]

MANUAL_PLACEHOLDER = "Enter custom text or select an item"


def new_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class RollEntry(BaseModel):
    """One addressable slot in a roll table."""

    model_config = ConfigDict(frozen=True)

    roll: int
    item_ref: str | None = None  # opaque catalog id, never dereferenced here
    custom_text: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.item_ref and not self.custom_text


class RollTableMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    generated_at: str = Field(default_factory=new_timestamp)
    source_list_name: str | None = None
    fill_strategy: FillStrategy


class RollTable(BaseModel):
    """A complete table: one entry per face of the die, rolls 1..N."""

    model_config = ConfigDict(frozen=True)

    entries: list[RollEntry]
    metadata: RollTableMetadata

    @property
    def die_size(self) -> int:
        return len(self.entries)


class GenerationOptions(BaseModel):
    """Input to the generator.

    ``die_size`` is deliberately unconstrained here; the generator rejects
    values below 1 with :class:`InvalidDieSizeError`.
    """

    model_config = ConfigDict(frozen=True)

    die_size: int
    source_items: list[str] = Field(default_factory=list)
    fill_strategy: FillStrategy = "auto"
    allow_duplicates: bool = False
    source_list_name: str | None = None
    placeholder_text: str = MANUAL_PLACEHOLDER


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.errors


class RollTableStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_rolls: int
    filled_rolls: int
    empty_rolls: int
    unique_item_count: int
    item_distribution: dict[str, int]
    completion_percentage: float


# ---------------------------------------------------------------------------
# Table invariant: entries are exactly the rolls 1..die_size, once each
# ---------------------------------------------------------------------------

def integrity_errors(table: RollTable, die_size: int) -> list[str]:
    """Return one message per violation of the dense-roll invariant.

    Checks, in order: entry count, rolls outside 1..die_size, rolls missing
    from 1..die_size, rolls appearing more than once. An empty list means the
    table is structurally sound.
    """
    errors: list[str] = []
    rolls = [entry.roll for entry in table.entries]

    if len(rolls) != die_size:
        errors.append(f"Expected {die_size} rolls, got {len(rolls)}")

    counts = Counter(rolls)
    for roll in sorted(r for r in counts if r < 1 or r > die_size):
        errors.append(f"Roll out of range: {roll}")

    for expected in range(1, die_size + 1):
        if expected not in counts:
            errors.append(f"Missing roll: {expected}")

    for roll, count in sorted(counts.items()):
        if count > 1:
            errors.append(f"Duplicate roll number: {roll} (appears {count} times)")

    return errors


# ---------------------------------------------------------------------------
# Error kinds: precondition violations raised to the caller
# ---------------------------------------------------------------------------

class RollTableError(ValueError):
    """Raised when a caller breaks a precondition of a table operation."""


class InvalidDieSizeError(RollTableError):
    """Raised when a table is requested for a die with fewer than one face."""


class UnsupportedExportFormatError(RollTableError):
    """Raised when an export is requested in a format we cannot write."""
