"""
Public API Routes

This module handles the /api endpoints:
- GET /api/healthz: Liveness check
- POST /api/validate_chirp: Length check and profanity filtering
- POST /api/users: Create a user from an email address

Request bodies are decoded by hand rather than through FastAPI's body
parameters so that undecodable payloads get this API's own error messages
instead of FastAPI's 422 validation report.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database import get_db
from chirpy.dependencies import get_chirp_validator
from chirpy.errors import error_response
from chirpy.schemas import ChirpRequest, CleanedChirp, UserCreate, UserResponse
from chirpy.services import users as user_store
from chirpy.services.moderation import ChirpValidator, Rejected, RejectionReason


# Router with /api prefix
router = APIRouter(prefix="/api", tags=["api"])


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    return "OK"


@router.post("/validate_chirp", response_model=CleanedChirp)
async def validate_chirp(
    request: Request,
    validator: ChirpValidator = Depends(get_chirp_validator)
):
    """
    Validate a chirp and return its censored body.

    Request body: {"body": "<text>"}

    Returns:
        200 {"cleaned_body": "..."} when the chirp is accepted
        400 {"error": "Chirp is too long"} when it exceeds the length limit
        400 {"error": "Something went wrong"} when the body can't be decoded
    """
    try:
        chirp = ChirpRequest.model_validate_json(await request.body())
    except ValidationError:
        outcome = Rejected(RejectionReason.MALFORMED)
    else:
        outcome = validator.validate(chirp.body)

    if isinstance(outcome, Rejected):
        return error_response(status.HTTP_400_BAD_REQUEST, outcome.message)
    return CleanedChirp(cleaned_body=outcome.cleaned_body)


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse
)
async def create_user(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a user.

    Request body: {"email": "<address>"}

    Store failures (duplicate email included) raise StoreError, which is
    rendered as 500 {"error": "Failed to create user"}.
    """
    try:
        params = UserCreate.model_validate_json(await request.body())
    except ValidationError:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")

    user = await user_store.create_user(db, params.email)
    return UserResponse.from_user(user)
