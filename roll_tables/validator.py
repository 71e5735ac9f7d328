"""Roll-table validation.

Hard errors come from the table invariant (see models.integrity_errors) and
make the table invalid. Warnings flag quality issues a user may still accept:
empty rolls, and a lopsided item distribution.
"""

from __future__ import annotations

from .models import RollTable, ValidationResult, integrity_errors
from .stats import item_distribution

# Warn when more than this many entries are empty.
EMPTY_ENTRY_WARNING_THRESHOLD = 0
# Warn when the most- and least-placed items differ by more than this.
UNEVEN_DISTRIBUTION_THRESHOLD = 2


def validate_roll_table(table: RollTable, die_size: int) -> ValidationResult:
    errors = integrity_errors(table, die_size)
    warnings: list[str] = []

    empty_count = sum(1 for e in table.entries if e.is_empty)
    if empty_count > EMPTY_ENTRY_WARNING_THRESHOLD:
        warnings.append(f"{empty_count} empty roll entries")

    counts = item_distribution(table).values()
    if counts and max(counts) - min(counts) > UNEVEN_DISTRIBUTION_THRESHOLD:
        warnings.append("Uneven item distribution detected")

    return ValidationResult(errors=errors, warnings=warnings)
