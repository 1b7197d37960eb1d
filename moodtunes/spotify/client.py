"""
Spotify recommendations client.

Handles the single upstream query of the mood flow:
- builds the /recommendations request from a RecommendationRequest
- reduces each returned track to a TrackSummary
"""
import logging
from typing import List, Optional

import requests

from ..recommendation.errors import UpstreamFailure
from ..recommendation.schemas import RecommendationRequest, TrackSummary


SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"


class SpotifyRecommendationsClient:
    """Thin wrapper around ``GET /v1/recommendations``."""

    def __init__(self,
                 api_base_url: str = SPOTIFY_API_BASE_URL,
                 session: Optional[requests.Session] = None):
        self.api_base_url = api_base_url.rstrip('/')
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    @property
    def recommendations_url(self) -> str:
        return f"{self.api_base_url}/recommendations"

    def get_recommendations(self, access_token: str, request: RecommendationRequest) -> List[TrackSummary]:
        """
        Fetch recommendations for a derived mood request.

        Args:
            access_token: Bearer token from the client-credentials exchange
            request: Seeds, limit and target features for the query

        Returns:
            One TrackSummary per returned track, in upstream order

        Raises:
            UpstreamFailure: If the call fails or the body cannot be mapped
        """
        try:
            response = self.session.get(
                self.recommendations_url,
                params=request.to_query_params(),
                headers={"Authorization": f"Bearer {access_token}"},
            )
            response.raise_for_status()
            tracks = response.json()["tracks"]
            summaries = [TrackSummary.from_spotify_track(track) for track in tracks]
        except requests.RequestException as e:
            self.logger.error(f"Error fetching recommendations: {e}")
            raise UpstreamFailure(str(e)) from e
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            self.logger.error(f"Error fetching recommendations: malformed response ({type(e).__name__}: {e})")
            raise UpstreamFailure(f"malformed response: {e}") from e

        self.logger.debug(f"Received {len(summaries)} tracks for mood '{request.mood}'")
        return summaries
