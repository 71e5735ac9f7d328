"""Roll-table generation and distribution.

Pipeline:
  1. generate_roll_table(options)             one entry per face, rolls 1..N
  2. optimize_roll_table_distribution(...)    optional: fill empty rolls
     shuffle_roll_table(table, rng)           optional: permute assignments
  3. validate_roll_table(table, die_size)     before the caller persists
  4. get_roll_table_stats / export_roll_table  read-only views, any time

All functions are pure: they take a table and return a new one. Precondition
violations raise RollTableError subclasses; integrity problems are returned
as a ValidationResult.
"""

# Re-export the public API so `import roll_tables` is enough for callers.

from .models import (  # noqa: F401
    MANUAL_PLACEHOLDER,
    FillStrategy,
    GenerationOptions,
    InvalidDieSizeError,
    RollEntry,
    RollTable,
    RollTableError,
    RollTableMetadata,
    RollTableStats,
    UnsupportedExportFormatError,
    ValidationResult,
    integrity_errors,
)

from .selector import select_entry, select_item  # noqa: F401

from .generator import (  # noqa: F401
    COMMON_DIE_SIZES,
    create_balanced_roll_table,
    generate_roll_table,
    recommended_die_size,
)

from .optimizer import optimize_roll_table_distribution  # noqa: F401
from .shuffler import shuffle_roll_table  # noqa: F401
from .validator import validate_roll_table  # noqa: F401
from .stats import get_roll_table_stats  # noqa: F401
from .exporter import ExportFormat, export_roll_table  # noqa: F401
from .config import TableSettings, load_settings  # noqa: F401
