"""API package."""

from trackpkg.api.routes import router

__all__ = ["router"]
