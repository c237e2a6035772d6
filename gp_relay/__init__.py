# gp_relay/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn gp_relay:app --port 5000
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
