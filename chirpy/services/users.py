"""
User Store

Thin async wrapper around the users table. Routes call these functions
with the request's database session.

Failures are logged here with the driver error and re-raised as
StoreError, which the API renders as a generic 500. Nothing is retried.
Drivers raise connection errors (refused, reset, unreachable host) as
plain OSError rather than SQLAlchemyError, so both are caught.
"""

import logging

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.errors import StoreError
from chirpy.models import User

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, email: str) -> User:
    """
    Insert a user and return it with its generated id and timestamps.

    The email is stored as given. A duplicate email violates the unique
    constraint and surfaces as StoreError like any other database error.

    Args:
        db: Database session for the current request
        email: Email address of the new user

    Raises:
        StoreError: If the insert fails
    """
    user = User(email=email)
    db.add(user)
    try:
        await db.commit()
        await db.refresh(user)
    except (SQLAlchemyError, OSError) as e:
        await db.rollback()
        logger.error(f"Failed to create user: {e}")
        raise StoreError("Failed to create user") from e
    return user


async def delete_all_users(db: AsyncSession) -> int:
    """
    Delete every user. Their chirps go with them through ON DELETE CASCADE.

    Returns:
        Number of deleted users

    Raises:
        StoreError: If the delete fails
    """
    try:
        result = await db.execute(delete(User))
        await db.commit()
    except (SQLAlchemyError, OSError) as e:
        await db.rollback()
        logger.error(f"Failed to delete users: {e}")
        raise StoreError("Failed to delete users") from e
    logger.info(f"Deleted {result.rowcount} users")
    return result.rowcount
