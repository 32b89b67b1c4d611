"""
BMS Hub API package.

Provides the FastAPI application for the apartment management service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
