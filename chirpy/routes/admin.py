"""
Admin Routes

- GET /admin/metrics: HTML page with the number of static file hits
- POST /admin/reset: Zero the hit counter and delete all users (dev only)
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config import settings
from chirpy.database import get_db
from chirpy.dependencies import get_hit_counter
from chirpy.errors import ForbiddenError
from chirpy.services import users as user_store
from chirpy.services.metrics import HitCounter
from chirpy.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/metrics", response_class=HTMLResponse)
async def metrics(
    request: Request,
    hits: HitCounter = Depends(get_hit_counter)
):
    return templates.TemplateResponse(request, "metrics.html", {
        "hits": hits.read()
    })


@router.post("/reset", response_class=PlainTextResponse)
async def reset(
    hits: HitCounter = Depends(get_hit_counter),
    db: AsyncSession = Depends(get_db)
):
    """
    Reset the hit counter and wipe the users table.

    Only allowed when PLATFORM is "dev". Anywhere else the request is
    rejected with 403 and nothing is changed.

    Users are deleted first; if that fails the counter keeps its value.
    """
    if not settings.is_dev_platform:
        logger.warning(f"Rejected reset on platform {settings.PLATFORM!r}")
        raise ForbiddenError()

    await user_store.delete_all_users(db)
    hits.reset()
    return "Hits reset to 0 and users deleted"
