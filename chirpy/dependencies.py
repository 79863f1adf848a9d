"""
Shared Dependencies for FastAPI Routes

The hit counter and the chirp validator are created once per application
in create_app() and stored on app.state. These dependencies hand them to
route handlers, so handlers never reach for module-level globals.

Usage in routes:
    @router.get("/metrics")
    async def metrics(hits: HitCounter = Depends(get_hit_counter)):
        return {"hits": hits.read()}
"""

from fastapi import Request

from chirpy.services.metrics import HitCounter
from chirpy.services.moderation import ChirpValidator


def get_hit_counter(request: Request) -> HitCounter:
    return request.app.state.hits


def get_chirp_validator(request: Request) -> ChirpValidator:
    return request.app.state.chirp_validator
