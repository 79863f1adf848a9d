"""
Chirpy Application Package

This package contains the Chirpy API: short text posts ("chirps") are
length-checked and profanity-filtered, static file hits are counted for an
admin dashboard, and users are stored in a relational database. The package
is organized as follows:

- config.py: Application configuration and environment settings
- database.py: Database connection and session management
- dependencies.py: FastAPI dependency injection functions
- errors.py: Error types and JSON error handlers
- middleware.py: Hit counting ASGI middleware
- main.py: FastAPI application factory and entry point
- models.py: SQLAlchemy ORM database models
- schemas.py: Pydantic request and response bodies
- templating.py: Jinja2 template configuration

Subpackages:
- routes/: API route handlers (api, admin)
- services/: Business logic (metrics, moderation, users)
- templates/: HTML templates for server-side rendering
- static/: Files served at /app/
"""
