"""
Moodtunes REST API Server

Run the server with:
    python api.py

Or with uvicorn directly:
    uvicorn api:app --port 5000

The port defaults to 5000 and can be overridden with the PORT environment
variable. Spotify credentials are read from SPOTIFY_CLIENT_ID and
SPOTIFY_CLIENT_SECRET (a .env file is honoured).
"""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moodtunes import __version__
from moodtunes.api.routes import router, recommendation_error_handler
from moodtunes.api.dependencies import get_app_state
from moodtunes.recommendation.errors import RecommendationError


app = FastAPI(
    title="Moodtunes",
    description="""
**Mood-based Spotify recommendations**

Pick a mood and get ten tracks from Spotify's recommendation engine. Each mood
maps to a seed genre and target audio features; targets are nudged randomly
on every request so refreshing yields a new set.

## Quick Start

1. Check API health: `GET /health`
2. List moods: `GET /moods`
3. Get recommendations: `GET /recommend/mood/{mood}`

## Moods

happy, chill, party, ambient, classical, jazz, hip-hop, pop, rock, blues,
soft, sad, heartbreak, empty. Unknown moods fall back to `pop`.
    """,
    version=__version__,
    license_info={
        "name": "MIT",
    }
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RecommendationError, recommendation_error_handler)

app.include_router(router, prefix="/api/v1")

# Also mount at root; the console client and browsers call /recommend/mood/{mood}
app.include_router(router)


@app.on_event("startup")
async def startup_event():
    """Load configuration and build the recommendation engine."""
    state = get_app_state()
    state.logger.info("Moodtunes API is ready", port=state.config.server.port)


if __name__ == "__main__":
    import uvicorn

    config = get_app_state().config
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port
    )
