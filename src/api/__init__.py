"""API module for the recommendation service wire contract."""

from src.api.models import RecommendRequest, RecommendResponse

__all__ = [
    "RecommendRequest",
    "RecommendResponse",
]
