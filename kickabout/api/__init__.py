"""Kickabout API package - FastAPI backend for driving simulation sessions."""

from kickabout.api.main import app, create_app

__all__ = ["app", "create_app"]
