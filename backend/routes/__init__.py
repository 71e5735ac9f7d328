"""FastAPI API endpoints under /api.

Endpoint groups: settings (health, settings, die sizes) and roll-tables
(generate, optimize, shuffle, validate, stats, export). Every endpoint is
stateless: tables come in with the request and go out in the response.
Persisting them is the caller's job.
"""

from fastapi import APIRouter

from .settings import router as settings_router
from .tables import router as tables_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(tables_router)
