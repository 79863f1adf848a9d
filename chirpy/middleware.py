"""
Hit Counting Middleware

ASGI wrapper that increments a HitCounter once per HTTP request before
handing the request to the wrapped application. It is mounted around the
static file server only, so API and admin requests are not counted.
"""

from starlette.types import ASGIApp, Receive, Scope, Send

from chirpy.services.metrics import HitCounter


class HitCounterMiddleware:
    def __init__(self, app: ASGIApp, hits: HitCounter):
        self.app = app
        self.hits = hits

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        # Lifespan and websocket scopes are not hits
        if scope["type"] == "http":
            self.hits.increment()
        await self.app(scope, receive, send)
