"""Health check, settings, and die-size suggestion endpoints."""

from fastapi import APIRouter, HTTPException, Request

from roll_tables import recommended_die_size

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings(request: Request):
    """Get the active table settings."""
    return request.app.state.settings


@router.get("/die-sizes")
async def die_sizes(request: Request, item_count: int = 0):
    """List the offered dice and the one recommended for item_count items."""
    if item_count < 0:
        raise HTTPException(400, "item_count must not be negative")
    sizes = request.app.state.settings.die_sizes
    return {
        "die_sizes": list(sizes),
        "recommended": recommended_die_size(item_count, sizes),
    }
