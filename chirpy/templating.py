"""
Jinja2 Template Configuration

Centralized template loader for rendering HTML responses.
This instance is imported by route handlers to render templates.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates


# Resolved relative to the package so rendering works from any cwd
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
