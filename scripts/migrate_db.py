"""
Database Migration Script

Adds (or removes) the chirps table on a database created before chirps
existed. Fresh databases get the table from create_all() on startup and
don't need this.

Usage:
    python scripts/migrate_db.py up
    python scripts/migrate_db.py down
"""

import asyncio
import logging
import os
import sys

# Add parent directory to Python path so we can import chirpy modules
# This allows running the script from any directory
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from chirpy.database import engine

logger = logging.getLogger("migrate_db")


UP = """
CREATE TABLE chirps (
    id UUID PRIMARY KEY,
    body TEXT NOT NULL,
    user_id UUID NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""

DOWN = "DROP TABLE chirps"


async def migrate(direction: str) -> bool:
    statement = UP if direction == "up" else DOWN
    try:
        async with engine.begin() as conn:
            await conn.execute(text(statement))
    except SQLAlchemyError as e:
        # Usually means the migration was already applied (or reverted)
        logger.error(f"Migration {direction} failed: {e}")
        return False
    finally:
        await engine.dispose()
    logger.info(f"Migration {direction} applied")
    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
    direction = sys.argv[1] if len(sys.argv) > 1 else "up"
    if direction not in ("up", "down"):
        sys.exit(f"usage: {sys.argv[0]} [up|down]")
    ok = asyncio.run(migrate(direction))
    sys.exit(0 if ok else 1)
