"""
Recommendation engine for Moodtunes.
"""
from typing import List, Optional, TYPE_CHECKING

from .errors import CredentialFailure
from .schemas import TrackSummary
from ..utils.logging import StructuredLogger

if TYPE_CHECKING:
    from ..moods.resolver import MoodResolver
    from ..spotify.auth import SpotifyAuthenticator
    from ..spotify.client import SpotifyRecommendationsClient


class MoodRecommendationEngine:
    """Orchestrates one mood recommendation: token, mood targets, upstream query.

    Every call is independent. The token is requested anew each time and no
    state is shared between calls.
    """

    def __init__(self,
                 authenticator: "SpotifyAuthenticator",
                 client: "SpotifyRecommendationsClient",
                 resolver: "MoodResolver",
                 logger: Optional[StructuredLogger] = None):
        """Initialize the recommendation engine.

        Args:
            authenticator: Performs the client-credentials token exchange
            client: Queries the upstream recommendations endpoint
            resolver: Derives seeds and target features for a mood
            logger: Structured logger for per-request operation records
        """
        self.authenticator = authenticator
        self.client = client
        self.resolver = resolver
        self.logger = logger or StructuredLogger(__name__)

    def recommend(self, mood: str) -> List[TrackSummary]:
        """Generate track recommendations for a mood label.

        Args:
            mood: Mood label, matched case-insensitively

        Returns:
            List of TrackSummary objects, as many as upstream returned

        Raises:
            CredentialFailure: If no access token could be obtained; the
                upstream endpoint is not called in that case
            UpstreamFailure: If the recommendations call failed
        """
        with self.logger.operation_context("MoodRecommendationEngine", "recommend", mood=mood) as op_logger:
            access_token = self.authenticator.fetch_access_token()
            if not access_token:
                raise CredentialFailure("token exchange returned no token")

            request = self.resolver.resolve(mood)
            tracks = self.client.get_recommendations(access_token, request)

            op_logger.info(
                f"Recommended {len(tracks)} tracks for mood '{request.mood}'",
                seed_genre=request.seed_genre,
                seed_track=request.seed_track_id,
                track_count=len(tracks)
            )
        return tracks
