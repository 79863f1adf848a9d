"""
Database Models for Chirpy

This module defines the SQLAlchemy ORM models for the application:
- User: Account created through POST /api/users
- Chirp: Stored chirps, one user to many chirps

Chirps are defined at the schema level only; no route writes them yet.
"""

import uuid
from datetime import datetime

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import declarative_base, relationship, backref


# Base class for all ORM models
# All models must inherit from Base to be recognized by SQLAlchemy
Base = declarative_base()


class User(Base):
    """
    User model.

    Email format is not validated by the application. Uniqueness is
    enforced by the database constraint alone.
    """
    __tablename__ = "users"

    # Generated client-side so the id is known before flush
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Bumped by the ORM on every UPDATE
    updated_at = Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    email = Column(String, unique=True, nullable=False, index=True)


class Chirp(Base):
    """A stored chirp. Deleted together with its author."""
    __tablename__ = "chirps"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    body = Column(Text, nullable=False)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    # passive_deletes lets the database ON DELETE CASCADE do the work
    # when users are removed with a bulk DELETE
    user = relationship(
        "User",
        backref=backref("chirps", passive_deletes=True)
    )
