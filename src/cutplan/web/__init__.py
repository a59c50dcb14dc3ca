"""FastAPI REST API for cut planning.

This module provides a REST API for planning cuts onto stock boards,
sizing stock purchases, and validating project files.

Usage:
    uvicorn cutplan.web:app --reload
"""

from cutplan.web.app import app, create_app

__all__ = ["app", "create_app"]
