"""Roll-table endpoints: generate, optimize, shuffle, validate, stats, export."""

import logging
import random

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from roll_tables import (
    GenerationOptions,
    RollTable,
    RollTableError,
    create_balanced_roll_table,
    export_roll_table,
    generate_roll_table,
    get_roll_table_stats,
    optimize_roll_table_distribution,
    shuffle_roll_table,
    validate_roll_table,
)

from .models import ExportBody, GenerateBody, OptimizeBody, ShuffleBody, ValidateBody

logger = logging.getLogger(__name__)

router = APIRouter()

_MEDIA_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
    "markdown": "text/markdown",
}


def _bad_request(e: RollTableError) -> HTTPException:
    logger.warning("Rejected roll-table request: %s", e)
    return HTTPException(400, str(e))


def _check_die_size(request: Request, die_size: int) -> None:
    limit = request.app.state.settings.max_die_size
    if die_size < 1 or die_size > limit:
        raise HTTPException(400, f"die_size must be between 1 and {limit}")


# Fields a balanced table decides for itself.
_BALANCED_FIXED = ("fill_strategy", "allow_duplicates", "placeholder_text")


@router.post("/roll-tables/generate")
async def generate(request: Request, body: GenerateBody):
    """Generate a table preview.

    With balanced=true the table is auto-filled, duplicates are allowed only
    when the pool is smaller than the die, and the optimizer runs afterwards.
    Sending fill_strategy, allow_duplicates or placeholder_text alongside
    balanced=true is rejected.
    """
    _check_die_size(request, body.die_size)
    settings = request.app.state.settings
    try:
        if body.balanced:
            conflicting = [f for f in _BALANCED_FIXED if f in body.model_fields_set]
            if conflicting:
                raise HTTPException(
                    400, f"balanced tables do not accept: {', '.join(conflicting)}"
                )
            return create_balanced_roll_table(
                body.source_items, body.die_size,
                source_list_name=body.source_list_name,
            )
        options = GenerationOptions(
            die_size=body.die_size,
            source_items=body.source_items,
            fill_strategy=body.fill_strategy,
            allow_duplicates=body.allow_duplicates,
            source_list_name=body.source_list_name,
            placeholder_text=body.placeholder_text or settings.placeholder_text,
        )
        return generate_roll_table(options)
    except RollTableError as e:
        raise _bad_request(e)


@router.post("/roll-tables/optimize")
async def optimize(body: OptimizeBody):
    """Fill empty rolls from the source pool."""
    return optimize_roll_table_distribution(body.table, body.source_items)


@router.post("/roll-tables/shuffle")
async def shuffle(body: ShuffleBody):
    """Shuffle assignments across rolls. A seed makes the result repeatable."""
    rng = random.Random(body.seed) if body.seed is not None else None
    return shuffle_roll_table(body.table, rng)


@router.post("/roll-tables/validate")
async def validate(request: Request, body: ValidateBody):
    """Check table integrity against the expected die size."""
    _check_die_size(request, body.die_size)
    return validate_roll_table(body.table, body.die_size)


@router.post("/roll-tables/stats")
async def stats(table: RollTable):
    """Fill counts and item distribution for a table."""
    return get_roll_table_stats(table)


@router.post("/roll-tables/export")
async def export(request: Request, body: ExportBody):
    """Export a table as csv, json or markdown text."""
    limit = request.app.state.settings.max_table_name_length
    if body.name is not None and len(body.name) > limit:
        raise HTTPException(400, f"name must be at most {limit} characters")
    try:
        text = export_roll_table(body.table, body.format, body.name)
    except RollTableError as e:
        raise _bad_request(e)
    return PlainTextResponse(text, media_type=_MEDIA_TYPES[body.format])
