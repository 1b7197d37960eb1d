"""
FastAPI routes for the Moodtunes REST API.
"""
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from .schemas import TrackSummaryResponse, MoodsResponse, HealthResponse
from .dependencies import get_recommendation_engine, get_config
from .. import __version__
from ..config.settings import AppConfig
from ..moods.profiles import available_moods, DEFAULT_PROFILE
from ..recommendation.engine import MoodRecommendationEngine
from ..recommendation.errors import RecommendationError


router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["System"],
    summary="Health check endpoint"
)
async def health_check(config: AppConfig = Depends(get_config)):
    """
    Check the health status of the API.

    Reports whether Spotify credentials are configured; it does not contact Spotify.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        credentials_configured=config.spotify.has_credentials
    )


@router.get(
    "/moods",
    response_model=MoodsResponse,
    tags=["Metadata"],
    summary="List known moods"
)
async def list_moods():
    """
    Get the mood labels with a dedicated audio-feature profile.

    Any other label is still accepted and falls back to the default genre.
    """
    return MoodsResponse(moods=available_moods(), default_genre=DEFAULT_PROFILE.seed_genre)


@router.get(
    "/recommend/mood/{mood}",
    response_model=List[TrackSummaryResponse],
    responses={
        500: {
            "content": {"text/plain": {}},
            "description": "Token exchange or recommendations call failed"
        }
    },
    tags=["Recommendations"],
    summary="Recommend tracks for a mood"
)
def recommend_for_mood(
    mood: str,
    engine: MoodRecommendationEngine = Depends(get_recommendation_engine)
):
    """
    Get up to 10 Spotify tracks matching a mood.

    The mood is matched case-insensitively against the known moods. Target
    valence and energy (and acousticness where the mood defines it) are
    varied by up to +/-0.1 on every call, so repeated calls return
    different tracks.
    """
    tracks = engine.recommend(mood)
    return [TrackSummaryResponse.from_summary(track) for track in tracks]


async def recommendation_error_handler(request: Request, exc: RecommendationError) -> PlainTextResponse:
    """Report recommendation failures as a 500 with a fixed plain-text message."""
    return PlainTextResponse(exc.message, status_code=500)
