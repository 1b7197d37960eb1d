"""
Recommendation module for Moodtunes.

This module turns a mood label into Spotify track recommendations,
including request derivation, the upstream query and response shaping.
"""

from .engine import MoodRecommendationEngine
from .errors import RecommendationError, CredentialFailure, UpstreamFailure
from .schemas import RecommendationRequest, TrackSummary

__all__ = [
    'MoodRecommendationEngine',
    'RecommendationError',
    'CredentialFailure',
    'UpstreamFailure',
    'RecommendationRequest',
    'TrackSummary'
]
