"""API routers module."""

from .reviews import router as reviews_router

__all__ = [
    "reviews_router",
]
