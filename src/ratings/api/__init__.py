"""Ratings domain API package."""

from ratings.api.errors import register_error_handlers
from ratings.api.routes import ratings_router

__all__ = ["ratings_router", "register_error_handlers"]
