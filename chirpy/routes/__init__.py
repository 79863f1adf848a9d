"""
API Routes Package

This package contains FastAPI route handlers for the application.
Each module defines routes for a specific feature area:

- api.py: Public routes (health check, chirp validation, user creation)
- admin.py: Admin routes (hit metrics, reset)

Routes are registered in main.py using FastAPI's router system,
which allows for modular organization and shared route prefixes.
"""
