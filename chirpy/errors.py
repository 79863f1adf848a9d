"""
Error Types and Exception Handlers

Every error response body has the same shape: {"error": "<message>"}.
Messages are fixed strings; driver errors and tracebacks are logged and
never sent to the client.

The one exception is 405 Method Not Allowed, which is returned with an
empty body.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException


class ChirpyError(Exception):
    """
    Base exception for Chirpy.

    Carries the HTTP status code and the public message used for the
    response. Raise a subclass from routes or services and the registered
    handler renders it.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ForbiddenError(ChirpyError):
    """Raised when a privileged operation is attempted outside dev."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message)


class StoreError(ChirpyError):
    """Raised when a database call made by the user store fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def chirpy_exception_handler(request: Request, exc: ChirpyError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> Response:
    """
    Render Starlette/FastAPI HTTP errors in the {"error": ...} envelope.

    405s keep their Allow header but carry no body.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return Response(status_code=exc.status_code, headers=exc.headers)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers
    )
