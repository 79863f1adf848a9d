"""
Database Engine and Sessions

One async engine per process, built from settings.DATABASE_URL. Chirpy
only talks to the database for users: POST /api/users inserts one and
POST /admin/reset deletes them all (see services/users.py).
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from chirpy.config import settings


# postgresql+asyncpg in deployments, sqlite+aiosqlite in the test suite.
# The lifespan in main.py creates tables on it and disposes it on shutdown
engine = create_async_engine(settings.DATABASE_URL, echo=False)


# expire_on_commit=False: create_user returns the User after commit and
# the route reads id, email and timestamps from it to build the response
AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_db():
    """
    Yield a session for the user store calls of a single request.

    Sessions are never shared between requests. The user store commits or
    rolls back itself; this dependency only closes the session afterwards,
    including when the store raised StoreError.
    """
    async with AsyncSessionLocal() as session:
        yield session
