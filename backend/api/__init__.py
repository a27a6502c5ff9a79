"""
MovieDB API package.

Provides the FastAPI application for the MovieDB humanID demo service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
