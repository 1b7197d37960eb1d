"""
API module for the Moodtunes REST API.
"""
from .routes import router, recommendation_error_handler
from .schemas import (
    TrackSummaryResponse,
    MoodsResponse,
    HealthResponse
)

__all__ = [
    "router",
    "recommendation_error_handler",
    "TrackSummaryResponse",
    "MoodsResponse",
    "HealthResponse"
]
