from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.routes import router
from roll_tables import TableSettings, load_settings

load_dotenv(Path(__file__).parent.parent / ".env")


def create_app(settings: TableSettings | None = None) -> FastAPI:
    app = FastAPI(title="Roll Tables")
    app.state.settings = settings or load_settings()
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (settings from environment / .env)
app = create_app()
