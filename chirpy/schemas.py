"""
Request and Response Schemas

Pydantic models for the JSON bodies of the /api routes.
"""

from uuid import UUID

from pydantic import BaseModel

from chirpy.models import User


# Timestamps are returned in RFC 3339 form, always UTC
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class ChirpRequest(BaseModel):
    # A missing key decodes to an empty chirp, a non-string value is an error
    body: str = ""


class CleanedChirp(BaseModel):
    cleaned_body: str


class UserCreate(BaseModel):
    email: str = ""


class UserResponse(BaseModel):
    id: UUID
    created_at: str
    updated_at: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            created_at=user.created_at.strftime(TIMESTAMP_FORMAT),
            updated_at=user.updated_at.strftime(TIMESTAMP_FORMAT),
            email=user.email
        )
