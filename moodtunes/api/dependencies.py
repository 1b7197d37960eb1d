"""
FastAPI dependency injection for Moodtunes.
"""
from functools import lru_cache
from typing import Optional
import logging

from ..config.settings import ConfigManager, AppConfig
from ..moods.resolver import MoodResolver
from ..recommendation.engine import MoodRecommendationEngine
from ..spotify.auth import SpotifyAuthenticator
from ..spotify.client import SpotifyRecommendationsClient
from ..utils.logging import StructuredLogger, configure_logging


logger = logging.getLogger(__name__)


class AppState:
    """Process-wide state for the Moodtunes API.

    Holds the configuration and one recommendation engine. The engine keeps
    no per-request data (tokens are fetched on every call), so requests
    never mutate anything here.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_manager = ConfigManager()
        self.config_path = config_path
        self.config: Optional[AppConfig] = None
        self.logger: Optional[StructuredLogger] = None
        self.engine: Optional[MoodRecommendationEngine] = None

    def initialize(self) -> None:
        """Load configuration and set up logging."""
        if self.config is not None:
            return

        try:
            self.config = self.config_manager.load(self.config_path)
        except Exception as e:
            logger.error(f"Failed to initialize Moodtunes: {e}")
            raise

        configure_logging(self.config.logging.level, self.config.logging.format)
        self.logger = StructuredLogger("moodtunes.api", level=self.config.logging.level)
        self.logger.log_config({
            "spotify": self.config.spotify.__dict__,
            "server": self.config.server.__dict__,
            "recommendation": self.config.recommendation.__dict__,
        })
        if not self.config.spotify.has_credentials:
            self.logger.warning(
                "Spotify credentials are not set; every recommendation request will fail. "
                "Set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET."
            )
        self.engine = self.build_engine()

    def build_engine(self) -> MoodRecommendationEngine:
        """Create a recommendation engine from the loaded configuration."""
        spotify = self.config.spotify
        recommendation = self.config.recommendation
        return MoodRecommendationEngine(
            authenticator=SpotifyAuthenticator(
                spotify.client_id,
                spotify.client_secret,
                token_url=spotify.token_url
            ),
            client=SpotifyRecommendationsClient(spotify.api_base_url),
            resolver=MoodResolver(
                jitter=recommendation.jitter,
                limit=recommendation.limit,
                seed_tracks=recommendation.seed_tracks
            ),
            logger=StructuredLogger(
                "moodtunes.recommendation.engine",
                level=self.config.logging.level,
                fmt=self.config.logging.format
            )
        )


@lru_cache()
def get_app_state() -> AppState:
    """Get or create the application state."""
    state = AppState()
    state.initialize()
    return state


def get_recommendation_engine() -> MoodRecommendationEngine:
    """Dependency for getting the recommendation engine."""
    return get_app_state().engine


def get_config() -> AppConfig:
    """Dependency for getting the app configuration."""
    return get_app_state().config
