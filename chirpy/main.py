"""
Main Application Entry Point

This module sets up the FastAPI application with:
- Database initialization on startup
- Static file serving at /app/, counted by the hit counter
- Route registration
- JSON error envelopes

Run with:
    uvicorn chirpy.main:app
or:
    python -m chirpy
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy.config import settings
from chirpy.database import engine
from chirpy.errors import ChirpyError, chirpy_exception_handler, http_exception_handler
from chirpy.middleware import HitCounterMiddleware
from chirpy.models import Base
from chirpy.routes import admin, api
from chirpy.services.metrics import HitCounter
from chirpy.services.moderation import ChirpValidator, ProfanityFilter

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager - runs on startup and shutdown.

    Startup: create database tables if they don't exist.
    Shutdown: close pooled database connections.
    """
    logger.info(
        f"Starting Chirpy on platform {settings.PLATFORM!r} "
        f"with {engine.url.get_backend_name()} database"
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    await engine.dispose()


def create_app(
    hits: HitCounter | None = None,
    chirp_validator: ChirpValidator | None = None
) -> FastAPI:
    """
    Build the application.

    Each call gets its own hit counter unless one is passed in, so tests
    never share counts.

    Args:
        hits: Counter for static file hits
        chirp_validator: Validator used by POST /api/validate_chirp;
            defaults to one built from settings
    """
    if hits is None:
        hits = HitCounter()
    if chirp_validator is None:
        chirp_validator = ChirpValidator(
            ProfanityFilter(settings.profane_words),
            max_length=settings.CHIRP_MAX_LENGTH
        )

    app = FastAPI(title="Chirpy", lifespan=lifespan)
    app.state.hits = hits
    app.state.chirp_validator = chirp_validator

    app.add_exception_handler(ChirpyError, chirpy_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.include_router(api.router)
    app.include_router(admin.router)

    @app.get("/", include_in_schema=False)
    async def root():
        """
        Send visitors of the bare domain to the file server.

        This is not a catch-all: only GET / redirects. Other methods on /
        get 405, and unmatched paths get a JSON 404 instead of a redirect
        to /app/.
        """
        return RedirectResponse("/app/", status_code=302)

    # Every request under /app counts as a hit, including 404s and 405s
    # from the file server
    app.mount(
        "/app",
        HitCounterMiddleware(
            StaticFiles(directory=settings.fileserver_root, html=True, check_dir=False),
            hits
        ),
        name="app"
    )

    return app


app = create_app()
