"""Serialise roll tables to CSV, JSON or Markdown text.

    csv        "Roll","Item ID","Custom Text" header, every field quoted.
                Lossy: None and "" both come out as "".
    json       the whole table (entries + metadata), 2-space indented.
                Lossless; prefer it for re-import.
    markdown   optional "# name" title, then a Roll | Item | Notes table.
                Rendered from a Handlebars template.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Callable
from enum import Enum

import pybars

from .models import RollTable, UnsupportedExportFormatError

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    MARKDOWN = "markdown"


CSV_HEADER = ("Roll", "Item ID", "Custom Text")

# Triple-stash everywhere: Markdown is not HTML, item refs must not be escaped.
_MARKDOWN_TEMPLATE = (
    "{{#if title}}# {{{title}}}\n\n{{/if}}"
    "| Roll | Item | Notes |\n"
    "|------|------|-------|"
    "{{#each rows}}\n| {{{roll}}} | {{{item}}} | {{{notes}}} |{{/each}}"
)

_compiler = pybars.Compiler()
_markdown: Callable = _compiler.compile(_MARKDOWN_TEMPLATE)


def export_roll_table(
    table: RollTable, fmt: ExportFormat | str, table_name: str | None = None
) -> str:
    """Render ``table`` in ``fmt``. ``table_name`` is only used by markdown.

    Raises UnsupportedExportFormatError for anything but csv/json/markdown.
    """
    try:
        fmt = ExportFormat(fmt)
    except ValueError as e:
        raise UnsupportedExportFormatError(f"Unsupported export format: {fmt}") from e

    logger.debug("export format=%s entries=%d", fmt.value, len(table.entries))
    if fmt is ExportFormat.CSV:
        return export_csv(table)
    if fmt is ExportFormat.JSON:
        return export_json(table)
    return export_markdown(table, table_name)


def export_csv(table: RollTable) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for entry in table.entries:
        writer.writerow([entry.roll, entry.item_ref or "", entry.custom_text or ""])
    return buf.getvalue().removesuffix("\n")


def export_json(table: RollTable) -> str:
    return table.model_dump_json(indent=2)


def export_markdown(table: RollTable, table_name: str | None = None) -> str:
    rows = [
        {
            "roll": str(entry.roll),
            "item": entry.item_ref or "",
            "notes": entry.custom_text or "",
        }
        for entry in table.entries
    ]
    return str(_markdown({"title": table_name or "", "rows": rows}))
