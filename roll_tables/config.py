"""Settings for table generation, read from the environment.

    ROLL_TABLES_MAX_DIE_SIZE   largest die the API will generate (default 10000)
    ROLL_TABLES_DIE_SIZES      comma-separated dice offered to users
    ROLL_TABLES_PLACEHOLDER    custom text for entries of "manual" tables

The library never reads these itself; callers load a TableSettings once and
pass the values they need into the generator.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

from .generator import COMMON_DIE_SIZES
from .models import MANUAL_PLACEHOLDER


class TableSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_die_size: int = 10000
    die_sizes: tuple[int, ...] = COMMON_DIE_SIZES
    placeholder_text: str = MANUAL_PLACEHOLDER
    max_table_name_length: int = 100


def _parse_die_sizes(raw: str) -> tuple[int, ...]:
    return tuple(sorted({int(part) for part in raw.split(",") if part.strip()}))


def load_settings() -> TableSettings:
    """Build settings from environment variables, keeping defaults for unset ones."""
    fields: dict = {}
    max_die = os.getenv("ROLL_TABLES_MAX_DIE_SIZE", "").strip()
    if max_die:
        fields["max_die_size"] = int(max_die)
    die_sizes = os.getenv("ROLL_TABLES_DIE_SIZES", "").strip()
    if die_sizes:
        fields["die_sizes"] = _parse_die_sizes(die_sizes)
    placeholder = os.getenv("ROLL_TABLES_PLACEHOLDER", "")
    if placeholder:
        fields["placeholder_text"] = placeholder
    return TableSettings(**fields)
