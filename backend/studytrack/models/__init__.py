"""Models module for Pydantic schemas."""

from .review import (
    OverdueResponse,
    ReplayRequest,
    ReviewRequest,
    ReviewResponse,
    ReviewStateFields,
)

__all__ = [
    "OverdueResponse",
    "ReplayRequest",
    "ReviewRequest",
    "ReviewResponse",
    "ReviewStateFields",
]
